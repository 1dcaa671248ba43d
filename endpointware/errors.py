def invalid_endpoint(name: str) -> str:
    return f'Invalid endpoint "{name}".'


def not_logged_in(name: str) -> str:
    return f'The endpoint "{name}" requires Authorization header.'


def no_url() -> str:
    return 'You need to set "url" first before requesting endpoints.'


def missing_path_param(name: str, param: str) -> str:
    return f'The endpoint "{name}" requires path parameter "{param}".'


class ApiError(Exception):
    pass


class UnknownEndpoint(ApiError):
    def __init__(self, name: str):
        super().__init__(invalid_endpoint(name))
        self.name = name


class ClientNotConfigured(ApiError):
    def __init__(self):
        super().__init__(no_url())


class MissingPathParam(ApiError):
    def __init__(self, name: str, param: str):
        super().__init__(missing_path_param(name, param))
        self.name = name
        self.param = param


class NotAuthenticated(ApiError):
    def __init__(self, name: str):
        super().__init__(not_logged_in(name))
        self.name = name


class InvalidEndpointRule(ApiError):
    pass
