from .flow import (
    ConnectionCheck,
    ConnectionRequest,
    ConnectionResult,
    EdgeModel,
    FlowState,
    HistoryStep,
    NodeCreate,
    NodeDataModel,
    NodeDataUpdate,
    NodeModel,
    PositionModel,
)
from .responses import OperationStatus
from .validation import SaveRejection, SaveResult

__all__ = [
    'ConnectionCheck',
    'ConnectionRequest',
    'ConnectionResult',
    'EdgeModel',
    'FlowState',
    'HistoryStep',
    'NodeCreate',
    'NodeDataModel',
    'NodeDataUpdate',
    'NodeModel',
    'OperationStatus',
    'PositionModel',
    'SaveRejection',
    'SaveResult',
]
