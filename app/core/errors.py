class GenerationError(Exception):
    """Base class for failures while talking to the generation API"""


class TransportFailure(GenerationError):
    """Network error, timeout or non-2xx response from the generation API"""


class ParseFailure(GenerationError):
    """Response body does not have the candidates[0].content.parts[0] shape"""
