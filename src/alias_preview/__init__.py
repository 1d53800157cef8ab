"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Alias Preview - show shell alias expansions while typing.
"""
__version__ = "0.1.0"
