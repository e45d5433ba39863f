import os

FLASK_DEBUG = os.getenv('FLASK_DEBUG', 'False') == 'True'
AUTH_CODE = os.getenv('AUTH_CODE')
AUTH_COOKIE = 'authCode'
SECURE_COOKIE = os.getenv('SECURE_COOKIE', 'False') == 'True'
DASHBOARD_DIR = os.getenv('DASHBOARD_DIR', 'dashboard')
