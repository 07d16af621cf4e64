"""
Constants
Centralised storage for server identity, cop listing limits, and RuboCop flags.
"""
SERVER_NAME = "rubocop-mcp-server"
SERVER_VERSION = "0.1.0"

DEFAULT_COP_LIMIT = 50
MAX_COP_LIMIT = 100

AUTO_CORRECT_FLAG = "-A"
INSTALL_HINT = "gem install rubocop rubocop-rails"
