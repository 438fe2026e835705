"""
Firefox preference keys and proxy defaults.
"""

# Preference keys read from prefs.js
PROXY_TYPE_PROPERTY_NAME = "network.proxy.type"
AUTO_CONFIG_URL_PROPERTY_NAME = "network.proxy.autoconfig_url"
SHARE_SETTINGS_PROPERTY_NAME = "network.proxy.share_proxy_settings"
HIJACK_LOCALHOST_PROPERTY_NAME = "network.proxy.allow_hijacking_localhost"
EXCLUSIONS_PROPERTY_NAME = "network.proxy.no_proxies_on"

HTTP_PROPERTY_NAME = "network.proxy.http"
HTTP_PORT_PROPERTY_NAME = "network.proxy.http_port"
SSL_PROPERTY_NAME = "network.proxy.ssl"
SSL_PORT_PROPERTY_NAME = "network.proxy.ssl_port"
FTP_PROPERTY_NAME = "network.proxy.ftp"
FTP_PORT_PROPERTY_NAME = "network.proxy.ftp_port"
SOCKS_PROPERTY_NAME = "network.proxy.socks"
SOCKS_PORT_PROPERTY_NAME = "network.proxy.socks_port"

# Used for every protocol when no port preference is set
DEFAULT_PROTOCOL_PORT = 80

# Separators accepted in network.proxy.no_proxies_on
EXCLUSIONS_SEPARATOR_PATTERN = r"[,\s]+"

# Schemes accepted for network.proxy.autoconfig_url
PAC_URL_SCHEMES = ("http", "https", "ftp", "file")

# Environment overrides
PLATFORM_ENV_VAR = "FIREFOX_PROXY_PLATFORM"
PAC_TIMEOUT_ENV_VAR = "FIREFOX_PROXY_PAC_TIMEOUT"
DEFAULT_PAC_TIMEOUT = 30.0
