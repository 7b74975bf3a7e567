class AirlineIntelError(Exception):
    """Base exception for all airline_intel errors"""
    pass

class NotFoundError(AirlineIntelError, KeyError):
    """A dataset bundle or report view was requested by a name that is not registered"""
    pass

class UnsupportedShapeError(AirlineIntelError, TypeError):
    """
    A chart kind was requested for a bundle whose shape cannot feed it
    e.g. a horizontal bar chart over scalar metrics
    """
    pass

class BundleValidationError(AirlineIntelError, ValueError):
    """Bundle records break an invariant of their shape (percentages, ordering, counts)"""
    pass

class ConfigError(AirlineIntelError):
    """Invalid app configuration (env vars or AppConfig arguments)"""
    pass
