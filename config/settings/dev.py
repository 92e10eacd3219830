from .base import *

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '0.0.0.0', 'testserver']

INTERNAL_IPS = [
    '127.0.0.1',
]

# 개발 환경 로깅 (상세하게)
LOGGING['root']['level'] = 'DEBUG'
LOGGING['loggers'] = {
    'django.db.backends': {
        'handlers': ['console'],
        'level': 'INFO',  # SQL 쿼리 보고 싶으면 DEBUG
        'propagate': False,
    },
}
