# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Built-in trip pricing strategies.

This directory is the default discovery root for trip pricing. Modules here
are found by scanning, not imported by the package.
"""
