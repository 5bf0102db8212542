class StartupError(RuntimeError):
    """Raised when a service cannot reach the serving state"""
