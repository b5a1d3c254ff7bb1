class RoutineFinderError(Exception):
    """Base exception for all routine_finder errors"""
    pass

class ConfigError(RoutineFinderError):
    """Invalid or inconsistent global.json"""
    pass

class SourceFetchError(RoutineFinderError):
    """
    The remote schedule source could not be read:
    network failure, non-2xx status, or a body that is not JSON
    """
    pass
