"""Constants used throughout the digest service."""

# HTTP Headers
REQUEST_ID_HEADER = "X-Request-ID"

# Logical names of the result kinds handed to the email service
EMAIL_KIND_INSTANT = "instant"
EMAIL_KIND_DIGEST = "digest"
EMAIL_KIND_MESSAGE = "message"

# Job description prefix used to find previously scheduled dispatch jobs
DISPATCH_JOB_DESCRIPTION_PREFIX = "digest-dispatch:"
