'''Parsing topic names into their parts'''

import re
from urllib.parse import quote_plus

from . import constants
from .exceptions import MalformedTopicNameException

# Tenants, clusters and namespaces are restricted to this alphabet
VALID_NAME = re.compile(r'^[-=:.\w]+$')


def check_name(name, kind):
    '''Raise if the provided tenant / cluster / namespace name is invalid'''
    if not name or not VALID_NAME.match(name):
        raise MalformedTopicNameException('Invalid %s name: %r' % (kind, name))
    return name


class NamespaceName(object):
    '''The namespace a topic belongs to'''
    def __init__(self, tenant, namespace, cluster=None):
        self._tenant = check_name(tenant, 'tenant')
        if cluster is not None:
            cluster = check_name(cluster, 'cluster')
        self._cluster = cluster
        self._namespace = check_name(namespace, 'namespace')

    @property
    def tenant(self):
        return self._tenant

    @property
    def cluster(self):
        return self._cluster

    @property
    def local_name(self):
        return self._namespace

    @property
    def is_v2(self):
        '''Namespaces without a cluster use the current addressing'''
        return self._cluster is None

    def __str__(self):
        if self.is_v2:
            return '%s/%s' % (self._tenant, self._namespace)
        return '%s/%s/%s' % (self._tenant, self._cluster, self._namespace)

    def __repr__(self):
        return '<NamespaceName %s>' % self

    def __eq__(self, other):
        if not isinstance(other, NamespaceName):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self):
        return hash(str(self))


class TopicName(object):
    '''A fully-qualified topic name.

    Topics may be given in any of these forms:

        my-topic
        my-tenant/my-namespace/my-topic
        persistent://my-tenant/my-namespace/my-topic
        persistent://my-property/my-cluster/my-namespace/my-topic

    The first three use the current addressing scheme, and short names default
    to the persistent domain (and the `public/default` namespace when given
    only a local name). The last form, with a cluster, is the legacy scheme.
    Whichever is used decides the endpoints a lookup goes to.
    '''
    @classmethod
    def get(cls, topic):
        '''Parse the provided topic, raising MalformedTopicNameException'''
        if isinstance(topic, cls):
            return topic
        return cls(topic)

    def __init__(self, topic):
        if not isinstance(topic, str) or not topic:
            raise MalformedTopicNameException('Invalid topic name: %r' % (topic,))

        complete = self._expand(topic)
        domain, _, rest = complete.partition(constants.DOMAIN_SEPARATOR)
        if domain not in constants.DOMAINS:
            raise MalformedTopicNameException(
                'Invalid topic domain: %r' % domain)

        parts = rest.split('/', 3)
        if len(parts) == 3:
            tenant, namespace, local_name = parts
            cluster = None
        elif len(parts) == 4:
            tenant, cluster, namespace, local_name = parts
        else:
            raise MalformedTopicNameException(
                'Invalid topic name: %r' % complete)

        if not local_name:
            raise MalformedTopicNameException(
                'Invalid topic name: %r' % complete)

        self._domain = domain
        self._namespace = NamespaceName(tenant, namespace, cluster)
        self._local_name = local_name
        self._complete = complete
        self._partition_index = self._parse_partition_index(local_name)

    @staticmethod
    def _expand(topic):
        '''Turn short names into complete ones'''
        if constants.DOMAIN_SEPARATOR in topic:
            return topic

        parts = [part for part in topic.split('/') if part]
        if len(parts) == 3:
            return '%s://%s' % (constants.PERSISTENT, '/'.join(parts))
        elif len(parts) == 1:
            return '%s://%s/%s/%s' % (
                constants.PERSISTENT,
                constants.PUBLIC_TENANT,
                constants.DEFAULT_NAMESPACE,
                parts[0])
        raise MalformedTopicNameException(
            'Invalid short topic name %r, it should be in the format of '
            '<tenant>/<namespace>/<topic> or <topic>' % topic)

    @staticmethod
    def _parse_partition_index(local_name):
        '''The partition index, or -1 if this isn't a partition'''
        _, found, index = local_name.rpartition(
            constants.PARTITIONED_TOPIC_SUFFIX)
        if found and index.isdigit():
            return int(index)
        return -1

    @property
    def domain(self):
        return self._domain

    @property
    def tenant(self):
        return self._namespace.tenant

    @property
    def cluster(self):
        return self._namespace.cluster

    @property
    def namespace_portion(self):
        return self._namespace.local_name

    @property
    def namespace(self):
        return self._namespace

    @property
    def local_name(self):
        return self._local_name

    @property
    def encoded_local_name(self):
        '''The local name, form-encoded for use in a path'''
        return quote_plus(self._local_name, safe='*')

    @property
    def is_v2(self):
        return self._namespace.is_v2

    @property
    def scheme(self):
        '''Which addressing scheme this name was expressed in'''
        return constants.CURRENT if self.is_v2 else constants.LEGACY

    @property
    def is_persistent(self):
        return self._domain == constants.PERSISTENT

    @property
    def partition_index(self):
        return self._partition_index

    @property
    def is_partitioned(self):
        '''Whether this names a single partition of a partitioned topic'''
        return self._partition_index >= 0

    @property
    def partitioned_topic_name(self):
        '''The name of the partitioned topic this partition belongs to'''
        if not self.is_partitioned:
            return self._complete
        return self._complete.rsplit(constants.PARTITIONED_TOPIC_SUFFIX, 1)[0]

    def partition(self, index):
        '''The TopicName for the provided partition of this topic'''
        if index < 0 or self.is_partitioned:
            return self
        return TopicName('%s%s%d' % (
            self._complete, constants.PARTITIONED_TOPIC_SUFFIX, index))

    @property
    def lookup_prefix(self):
        '''The path segment lookups for this topic go through'''
        return constants.LOOKUP_PREFIXES[self.scheme]

    @property
    def lookup_name(self):
        '''The topic as it appears in a lookup path'''
        if self.is_v2:
            return '%s/%s/%s/%s' % (
                self._domain, self.tenant, self.namespace_portion,
                self.encoded_local_name)
        return '%s/%s/%s/%s/%s' % (
            self._domain, self.tenant, self.cluster, self.namespace_portion,
            self.encoded_local_name)

    def __str__(self):
        return self._complete

    def __repr__(self):
        return '<TopicName %s>' % self._complete

    def __eq__(self, other):
        if not isinstance(other, TopicName):
            return NotImplemented
        return self._complete == other._complete

    def __hash__(self):
        return hash(self._complete)
