"""Service settings read from environment variables."""

import os

_FALSE_VALUES = ('0', 'false', 'no', 'off')

LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Whether boards exchanged with the service carry the per-player resource lines.
CATAN_ECONOMY: bool = (
    os.environ.get('CATAN_ECONOMY', '1').strip().lower() not in _FALSE_VALUES
)
