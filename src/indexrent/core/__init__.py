# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
indexrent core: primitives, settings and the error taxonomy shared by the
escalation and ledger layers.
"""
