'''Constants for topic naming and lookups'''

# Addressing schemes
CURRENT = 'current'
LEGACY = 'legacy'

# Path segment used by the lookup endpoints for each scheme
LOOKUP_PREFIXES = {
    CURRENT: 'topic',
    LEGACY: 'destination'
}

# Root of the lookup endpoints
LOOKUP_ROOT = 'lookup/v2'

# Topic domains
PERSISTENT = 'persistent'
NON_PERSISTENT = 'non-persistent'
DOMAINS = (PERSISTENT, NON_PERSISTENT)
DOMAIN_SEPARATOR = '://'

# Where short topic names end up
PUBLIC_TENANT = 'public'
DEFAULT_NAMESPACE = 'default'

# Partitions of a partitioned topic are named <topic>-partition-<index>
PARTITIONED_TOPIC_SUFFIX = '-partition-'

# Seconds to wait on a blocking call
DEFAULT_READ_TIMEOUT = 60

# Threads the http transport uses for asynchronous requests
DEFAULT_MAX_WORKERS = 4
