"""
Central constants for the release-mirror package.

This module consolidates all constants used throughout the codebase
to eliminate magic numbers and strings.
"""

# ============================================================================
# Identifier and Key Constants
# ============================================================================

# Separator between owner and name in a repository identifier ("owner/name")
REPOSITORY_SEPARATOR = "/"

# Separator between the tag prefix and the version ("v1/2024-01-01")
TAG_VERSION_SEPARATOR = "/"

# Separator used when joining key segments
KEY_SEPARATOR = "/"

# Maximum object key length in bytes once UTF-8 encoded (S3 limit)
MAX_KEY_BYTES = 1024

# Supported key policies
KEY_POLICIES = ["flat", "versioned"]

# ============================================================================
# Source API Constants
# ============================================================================

# Default GitHub REST API endpoint
GITHUB_API_URL = "https://api.github.com"

# REST API version header value
GITHUB_API_VERSION = "2022-11-28"

# Media types for JSON metadata and raw asset downloads
GITHUB_JSON_MEDIA_TYPE = "application/vnd.github+json"
OCTET_STREAM_MEDIA_TYPE = "application/octet-stream"

# Page size for asset listings (GitHub maximum)
ASSETS_PER_PAGE = 100

# ============================================================================
# Network Constants
# ============================================================================

# Timeout for metadata requests (seconds)
DEFAULT_TIMEOUT = 30.0

# Timeout for asset downloads; large assets stream for a long time (seconds)
DOWNLOAD_TIMEOUT = 300.0

# Connect timeout (seconds)
CONNECT_TIMEOUT = 10.0

# Chunk size used when streaming asset bodies (bytes)
DEFAULT_CHUNK_SIZE = 64 * 1024

# ============================================================================
# Object Store Constants
# ============================================================================

# Region name required by the SDK; R2 ignores it
DEFAULT_REGION = "auto"

# Total attempts per request, including the first; no automatic retries
OBJECT_STORE_MAX_ATTEMPTS = 1

# ============================================================================
# Environment Variables
# ============================================================================

ENV_BUCKET_NAME = "R2_BUCKET_NAME"
ENV_ACCESS_KEY_ID = "R2_ACCESS_KEY_ID"
ENV_ACCESS_KEY_SECRET = "R2_SECRET_ACCESS_KEY"
ENV_ENDPOINT_URL = "R2_ENDPOINT_URL"
ENV_DEST = "R2_DEST"
ENV_REPOSITORY = "GITHUB_REPOSITORY"
ENV_RELEASE_ID = "RELEASE_ID"
ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
ENV_KEY_POLICY = "KEY_POLICY"
ENV_DRY_RUN = "DRY_RUN"
ENV_CONFIG = "RELEASE_MIRROR_CONFIG"
