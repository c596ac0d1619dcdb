from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version('iotex-payout')
except PackageNotFoundError:
    __version__ = 'unknown'
