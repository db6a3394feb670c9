'''The plumbing shared by our clients for the admin api'''

from concurrent import futures
import threading
from urllib.parse import urlsplit, urlunsplit, urljoin

from decorator import decorator
import requests

from .. import json, logger
from ..constants import DEFAULT_MAX_WORKERS, DEFAULT_READ_TIMEOUT
from .. import exceptions


class ClientException(exceptions.AdminException):
    '''A raw failure from the transport, before translation'''


@decorator
def wrap(function, *args, **kwargs):
    '''Wrap a function that returns a request with some exception handling'''
    try:
        req = function(*args, **kwargs)
        logger.debug('Got %s: %s', req.status_code, req.content)
        if req.status_code == 200:
            return req
        else:
            raise ClientException(
                '%s: %s' % (req.reason, req.content),
                status_code=req.status_code)
    except ClientException:
        raise
    except Exception as exc:
        raise ClientException(cause=exc)


@decorator
def json_wrap(function, *args, **kwargs):
    '''Return the json content of a function that returns a request'''
    try:
        return json.loads(function(*args, **kwargs).content)
    except ClientException:
        raise
    except Exception as exc:
        raise ClientException(cause=exc)


# The typed exception for each of the statuses we know about
STATUS_EXCEPTIONS = {
    401: exceptions.NotAuthorizedException,
    403: exceptions.NotAuthorizedException,
    404: exceptions.NotFoundException,
    405: exceptions.NotAllowedException,
    409: exceptions.ConflictException,
    412: exceptions.PreconditionFailedException
}


def translate(failure):
    '''Turn a failure from the transport into a typed exception'''
    if isinstance(failure, exceptions.AdminException) and (
            not isinstance(failure, ClientException)):
        return failure

    status_code = getattr(failure, 'status_code', None)
    cause = getattr(failure, 'cause', None) or failure
    if status_code in STATUS_EXCEPTIONS:
        cls = STATUS_EXCEPTIONS[status_code]
    elif status_code is not None and status_code >= 500:
        cls = exceptions.ServerSideErrorException
    else:
        cls = exceptions.TransportException

    message = getattr(failure, 'message', None)
    return cls(message, cause=cause, status_code=status_code)


def _relative(split_result, path):
    new_split = split_result._replace(path=urljoin(split_result.path, path))
    return urlunsplit(new_split)


class BaseClient(object):
    '''Base client class'''
    def __init__(self, target, read_timeout=DEFAULT_READ_TIMEOUT,
        max_workers=DEFAULT_MAX_WORKERS, **params):
        if isinstance(target, str):
            self._host = urlsplit(target)
        elif isinstance(target, (tuple, list)):
            self._host = urlsplit('http://%s:%s/' % tuple(target))
        else:
            raise TypeError('Host must be a string or tuple')
        # Paths are joined onto the root, so it must end in a slash
        self._host = self._host._replace(
            path=self._host.path.rstrip('/') + '/')
        self._read_timeout = read_timeout
        self._max_workers = max_workers
        self._params = params
        # Created on the first asynchronous request
        self._executor = None
        self._lock = threading.Lock()

    @property
    def root(self):
        '''The url all of our paths are relative to'''
        return urlunsplit(self._host)

    @wrap
    def get(self, path, *args, **kwargs):
        '''GET the provided endpoint'''
        target = _relative(self._host, path)
        params = dict(kwargs.get('params') or {})
        params.update(self._params)
        kwargs['params'] = params
        kwargs.setdefault('timeout', self._read_timeout)
        logger.debug('GET %s with %s, %s', target, args, kwargs)
        return requests.get(target, *args, **kwargs)

    @json_wrap
    def get_json(self, path, *args, **kwargs):
        '''GET the provided endpoint, and decode its json body'''
        return self.get(path, *args, **kwargs)

    def async_get(self, path, on_success, on_failure, decode=True):
        '''GET the provided endpoint without blocking.

        Exactly one of `on_success` (with the payload, json-decoded if `decode`)
        or `on_failure` (with the raw failure) is invoked, from one of our
        worker threads.'''
        with self._lock:
            if self._executor is None:
                self._executor = futures.ThreadPoolExecutor(
                    max_workers=self._max_workers)
            executor = self._executor
        try:
            executor.submit(
                self._invoke, path, on_success, on_failure, decode)
        except RuntimeError as exc:
            # The pool was shut down out from under us
            self._callback(on_failure, exc)

    def _invoke(self, path, on_success, on_failure, decode):
        '''Make a request, and hand off its outcome to the callbacks'''
        try:
            if decode:
                payload = self.get_json(path)
            else:
                payload = self.get(path).text
        except Exception as exc:
            logger.debug('GET %s failed: %s', path, exc)
            self._callback(on_failure, exc)
        else:
            self._callback(on_success, payload)

    def _callback(self, callback, value):
        '''Run a callback, which must not take down the worker'''
        try:
            callback(value)
        except Exception:
            logger.exception('Callback failed')

    def close(self):
        '''Stop accepting asynchronous requests'''
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=False)

    def __enter__(self):
        return self

    def __exit__(self, typ, value, trace):
        self.close()
