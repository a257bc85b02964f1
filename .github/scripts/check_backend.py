import sys
import httpx

try:
    r = httpx.get('http://127.0.0.1:8000/', timeout=5.0)
    print('STATUS', r.status_code)
    for name in ('content-security-policy', 'referrer-policy', 'x-frame-options', 'server', 'x-powered-by'):
        print(f'{name}: {r.headers.get(name)}')
except Exception as e:
    print('HTTP check failed:', e)
    sys.exit(0)
