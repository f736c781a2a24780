# PropBot Test Suite
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
PropBot test suite.

Unit tests for the rent status engine, the tenant ledger, reporting and
communication, organized to mirror the package layout.
"""
