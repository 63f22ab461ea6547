"""
Podwatch - Constants
"""

# Message defaults used when the provider config leaves them empty
DEFAULT_TITLE = ":red_circle: podwatch detected a crash in pod"
DEFAULT_TEXT = "There is an issue with container in a pod!"
FOOTER = ":eyes: Sent by podwatch"

# Slack rejects section text longer than 3000 characters; leave room for
# the code fence wrapping each chunk.
CHUNK_SIZE = 2000

SLACK_PROVIDER_NAME = "Slack"

# Environment variable fallbacks for the Slack provider config keys
SLACK_ENV_FALLBACKS = {
    "token": "SLACK_TOKEN",
    "channel": "SLACK_CHANNEL",
    "webhook": "SLACK_WEBHOOK",
}
