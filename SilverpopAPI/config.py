# SilverpopAPI/config.py
import os


def _env_bool(name, default):
    value = os.environ.get(name, default)
    return str(value).strip().lower() in ("true", "1", "t", "yes")


class Config:
    """
    XMLAPI connection settings, read from the environment.

      SILVERPOP_ENDPOINT  : XMLAPI URL, e.g. https://api-campaign-us-1.goacoustic.com/XMLAPI
      SILVERPOP_USERNAME  : login user
      SILVERPOP_PASSWORD  : login password
      SILVERPOP_VERIFY    : 'False' (default) | 'True' | path to a CA bundle
    """

    SILVERPOP_ENDPOINT = os.environ.get('SILVERPOP_ENDPOINT', 'https://api-campaign-us-1.goacoustic.com/XMLAPI')
    SILVERPOP_USERNAME = os.environ.get('SILVERPOP_USERNAME', '')
    SILVERPOP_PASSWORD = os.environ.get('SILVERPOP_PASSWORD', '')

    # Timeouts for the XMLAPI requests
    SILVERPOP_CONNECT_TIMEOUT   = int(os.environ.get("SILVERPOP_CONNECT_TIMEOUT", 10))
    SILVERPOP_OPERATION_TIMEOUT = int(os.environ.get("SILVERPOP_OPERATION_TIMEOUT", 60))

    # URL matrix parameter carrying the session id: <endpoint>;jsessionid=<SESSIONID>
    SILVERPOP_SESSION_PARAM = os.environ.get('SILVERPOP_SESSION_PARAM', 'jsessionid')

    # Start with transaction + fault logging on
    SILVERPOP_LOG_CALLS = _env_bool('SILVERPOP_LOG_CALLS', 'False')

    # The XMLAPI historically ran without certificate checks.
    # Normalize boolean-ish strings; anything else is a CA bundle path.
    SILVERPOP_VERIFY = os.environ.get('SILVERPOP_VERIFY', 'False')
    if isinstance(SILVERPOP_VERIFY, str) and SILVERPOP_VERIFY.lower() in ("false", "0", "no"):
        SILVERPOP_VERIFY = False
    elif isinstance(SILVERPOP_VERIFY, str) and SILVERPOP_VERIFY.lower() in ("true", "1", "yes"):
        SILVERPOP_VERIFY = True
