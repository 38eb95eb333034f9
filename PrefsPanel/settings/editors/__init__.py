"""Qt controls bound to preference store keys."""
