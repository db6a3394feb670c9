'''Exception classes'''


class AdminException(Exception):
    '''Base class for all exceptions in this library'''
    def __init__(self, message=None, cause=None, status_code=None):
        if message is None and cause is not None:
            message = str(cause) or cause.__class__.__name__
        Exception.__init__(self, message)
        self.message = message
        self.cause = cause
        self.status_code = status_code


class MalformedTopicNameException(AdminException, ValueError):
    '''A topic name could not be parsed'''


class TransportException(AdminException):
    '''A request to the admin api failed'''


class NotAuthorizedException(TransportException):
    '''Exception for 401 and 403'''


class NotFoundException(TransportException):
    '''Exception for 404'''


class NotAllowedException(TransportException):
    '''Exception for 405'''


class ConflictException(TransportException):
    '''Exception for 409'''


class PreconditionFailedException(TransportException):
    '''Exception for 412'''


class ServerSideErrorException(TransportException):
    '''Exception for any 5xx'''


class TimeoutException(AdminException):
    '''A blocking call gave up waiting for its result'''


class InterruptedException(AdminException):
    '''A blocking call was cancelled while waiting for its result'''
