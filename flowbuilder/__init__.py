"""Source package for FlowBuilder."""
