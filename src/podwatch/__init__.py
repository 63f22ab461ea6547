"""
Podwatch - Pod Crash Notifications

Formats pod crash and restart events from a Kubernetes cluster into
Slack messages and delivers them through a webhook or the Web API.
"""

__version__ = "0.1.0"
__author__ = "Podwatch Team"
