# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Allow ``python -m random_org_mcp``."""

from .server.app import main

main()
