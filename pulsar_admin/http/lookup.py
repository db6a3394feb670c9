'''A class for looking up which broker serves a topic over http'''

from collections import namedtuple
from concurrent import futures

from . import BaseClient, translate
from .. import logger
from ..constants import DEFAULT_READ_TIMEOUT, LOOKUP_ROOT
from ..exceptions import (
    InterruptedException, TimeoutException, TransportException)
from ..naming import TopicName


# How a lookup client was configured. It never changes after construction.
Config = namedtuple('Config', ['root', 'use_tls', 'read_timeout'])


def _complete(future, value):
    '''Resolve the future, unless the caller has already given up on it'''
    try:
        future.set_result(value)
    except futures.InvalidStateError:
        logger.debug('Dropping late result for cancelled lookup: %s', value)


def _fail(future, exc):
    '''Fail the future, unless the caller has already given up on it'''
    try:
        future.set_exception(exc)
    except futures.InvalidStateError:
        logger.debug('Dropping late failure for cancelled lookup: %s', exc)


class Client(BaseClient):
    '''A client for looking up topics.

    Every lookup comes in two flavors: the `_async` methods return a
    `concurrent.futures.Future` right away and never raise transport errors,
    while the plain methods wait on that future for up to `read_timeout`
    seconds and raise instead.

    Topic names are validated before anything is sent, so either flavor raises
    `MalformedTopicNameException` immediately when given a bad name.

    The blocking methods keep their future to themselves. To be able to cancel
    a blocking lookup from another thread, get the future from an `_async`
    method and `wait` on it: cancelling that future makes `wait` raise
    `InterruptedException`.
    '''
    def __init__(self, target, use_tls=False,
        read_timeout=DEFAULT_READ_TIMEOUT, **kwargs):
        BaseClient.__init__(self, target, read_timeout=read_timeout, **kwargs)
        self._config = Config(self.root, bool(use_tls), read_timeout)

    @property
    def config(self):
        return self._config

    def path(self, topic, *segments):
        '''The lookup path for the provided topic'''
        topic = TopicName.get(topic)
        return '/'.join(
            (LOOKUP_ROOT, topic.lookup_prefix, topic.lookup_name) + segments)

    def lookup_topic(self, topic):
        '''The url of the broker serving the provided topic'''
        return self.wait(self.lookup_topic_async(topic))

    def lookup_topic_async(self, topic):
        '''A future for the url of the broker serving the provided topic'''
        path = self.path(topic)
        future = futures.Future()

        def completed(data):
            key = 'brokerUrlTls' if self._config.use_tls else 'brokerUrl'
            try:
                url = data[key]
            except (KeyError, TypeError):
                _fail(future, TransportException(
                    'Lookup response missing %s: %r' % (key, data)))
            else:
                _complete(future, url)

        def failed(exc):
            _fail(future, translate(exc))

        self.async_get(path, completed, failed)
        return future

    def get_bundle_range(self, topic):
        '''The bundle range the provided topic belongs to'''
        return self.wait(self.get_bundle_range_async(topic))

    def get_bundle_range_async(self, topic):
        '''A future for the bundle range the provided topic belongs to'''
        path = self.path(topic, 'bundle')
        future = futures.Future()

        def completed(bundle_range):
            _complete(future, bundle_range)

        def failed(exc):
            _fail(future, translate(exc))

        self.async_get(path, completed, failed, decode=False)
        return future

    def wait(self, future):
        '''Wait on the future for up to our read timeout'''
        try:
            return future.result(timeout=self._config.read_timeout)
        except futures.CancelledError as exc:
            # The future stays cancelled, so whoever cancelled it can see that
            raise InterruptedException(
                'Interrupted waiting for lookup', cause=exc) from exc
        except futures.TimeoutError as exc:
            raise TimeoutException(
                'Lookup timed out after %ss' % self._config.read_timeout,
                cause=exc) from exc
