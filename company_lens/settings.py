"""Runtime settings for the Company Lens proxy.

Read once at import from the environment, with compiled-in defaults:
    COMPANY_LENS_ENDPOINT   remote MCP endpoint that executes queries
    COMPANY_LENS_LOG_LEVEL  stderr log level (DEBUG, INFO, ...)
"""
import os

DEFAULT_REMOTE_ENDPOINT = 'https://mcp-company-lens-v1.gepuro.net/mcp'

REMOTE_MCP_ENDPOINT = os.getenv('COMPANY_LENS_ENDPOINT', DEFAULT_REMOTE_ENDPOINT)
LOG_LEVEL = os.getenv('COMPANY_LENS_LOG_LEVEL', 'INFO').upper()

SERVER_NAME = 'company-lens-db'
SERVER_VERSION = '1.0.1'
