from enum import Enum, unique


@unique
class ErrorKind(str, Enum):
    NO_CONNECTION = "no_connection"
    INVALID_API_KEY = "invalid_api_key"
    SERVER_ERROR = "server_error"
