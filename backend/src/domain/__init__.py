"""Domain layer: validation rules, order state machine, error taxonomy."""
