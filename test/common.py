import mock
import unittest

from contextlib import contextmanager


class ClientTest(unittest.TestCase):
    @contextmanager
    def patched_get(self):
        with mock.patch.object(self.client, 'get') as get:
            yield get

    @contextmanager
    def patched_async_get(self):
        with mock.patch.object(self.client, 'async_get') as async_get:
            yield async_get

    def callbacks(self, async_get):
        '''The (on_success, on_failure) handed to the last async_get'''
        args = async_get.call_args[0]
        return args[1], args[2]
