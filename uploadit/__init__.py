# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Account management API issuing short-lived JWT bearer tokens."""

__version__ = "0.1.0"
