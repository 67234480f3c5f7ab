"""Find graft candidates for integration package fields in the ECS."""

__version__ = "0.1.0"
