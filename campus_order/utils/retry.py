# campus_order/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import requests

from campus_order.utils.settings import HTTP_RETRY_ATTEMPTS


#tylko dla idempotentnych wywolan (GET/PUT/DELETE), POST nigdy nie jest powtarzany
def http_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(HTTP_RETRY_ATTEMPTS),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type(requests.RequestException),
    )
