"""
Service context for log lines.

Identifies which client process wrote a line when several checkout
clients (kiosks, test workers) ship logs to the same collector.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'cinema-checkout')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    worker = os.getenv('PYTEST_XDIST_WORKER') or str(os.getpid())
    return f'{service_name}@{deploy_env}:{worker}'
