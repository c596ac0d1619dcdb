from decouple import Choices, Csv, config

from payout.config.networks import ENABLED_NETWORKS, MAINNET, NETWORKS, NetworkConfig

# network
NETWORK: str = config('NETWORK', default=MAINNET, cast=Choices(ENABLED_NETWORKS))
NETWORK_CONFIG: NetworkConfig = NETWORKS[NETWORK]

# graph
CHAIN_GRAPH_URL: str = config('CHAIN_GRAPH_URL', default='https://api.iotex.one/graphql')
ELECTION_GRAPH_URL: str = config(
    'ELECTION_GRAPH_URL', default='https://election.iotex.one/graphql'
)
GRAPH_API_TIMEOUT: int = config('GRAPH_API_TIMEOUT', default='30', cast=int)

# retries are only done by the election client
ELECTION_RETRY_ATTEMPTS: int = config('ELECTION_RETRY_ATTEMPTS', default=8, cast=int)
DEFAULT_RETRY_TIME = 30

# commission rates, percent
BLOCK_COMMISSION: int = config('BLOCK_COMMISSION', default=100, cast=int)
EPOCH_COMMISSION: int = config('EPOCH_COMMISSION', default=100, cast=int)
FOUNDATION_COMMISSION: int = config('FOUNDATION_COMMISSION', default=100, cast=int)

# parts per billion
SHARE_SCALE = 10**9

# alias:address pairs
ADDRESS_ALIASES: list[str] = config('ADDRESS_ALIASES', default='', cast=Csv())

# common
LOG_LEVEL: str = config('LOG_LEVEL', default='INFO')
GQL_LOG_LEVEL: str = config('GQL_LOG_LEVEL', default='WARNING')

# sentry config
SENTRY_DSN: str = config('SENTRY_DSN', default='')
