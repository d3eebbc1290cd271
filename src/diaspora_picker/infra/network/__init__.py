from __future__ import annotations

"""
Network Communication Infrastructure.

Facade over the HTTP clients that talk to the hosted account store.
"""

from diaspora_picker.infra.network.common import USER_AGENT, build_headers
from diaspora_picker.infra.network.profile_client import (
    fetch_profile,
    profile_endpoint,
    profile_filter,
    update_profile,
)

__all__ = [
    "USER_AGENT",
    "build_headers",
    "fetch_profile",
    "profile_endpoint",
    "profile_filter",
    "update_profile",
]
