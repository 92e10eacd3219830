from .base import *

DEBUG = False

# ALLOWED_HOSTS를 콤마로 구분된 문자열에서 리스트로 변환
allowed_hosts = os.getenv('ALLOWED_HOSTS', '')
ALLOWED_HOSTS = [host.strip() for host in allowed_hosts.split(',') if host.strip()]

# 보안 설정
SECURE_SSL_REDIRECT = os.getenv('SECURE_SSL_REDIRECT', 'True') == 'True'
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True

# CSRF 신뢰 출처
csrf_origins = os.getenv('CSRF_TRUSTED_ORIGINS', '')
CSRF_TRUSTED_ORIGINS = [origin.strip() for origin in csrf_origins.split(',') if origin.strip()]

LOGGING['root']['level'] = os.getenv('LOG_LEVEL', 'WARNING')
LOGGING['loggers'] = {
    'apps': {
        'handlers': ['console'],
        'level': 'INFO',  # 동기화 건수 로그는 운영에서도 남김
        'propagate': False,
    },
}
