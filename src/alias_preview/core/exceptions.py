"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Custom exceptions for the Alias Preview application.

This module defines specific exception types for configuration and alias
definition problems. Lookup misses and empty input are normal outcomes of
a preview cycle and are never raised.
"""


class AliasPreviewError(Exception):
    """Base exception class for all Alias Preview errors."""
    pass


class ConfigurationError(AliasPreviewError):
    """Exception raised when configuration is invalid."""
    
    def __init__(self, message: str, option: str = None):
        super().__init__(message)
        self.option = option
        
    def __str__(self):
        base_msg = super().__str__()
        if self.option:
            base_msg += f" (Option: {self.option})"
        return base_msg


class AliasDefinitionError(AliasPreviewError):
    """Exception raised when an alias definition cannot be parsed."""
    
    def __init__(self, message: str, path: str = None, line_number: int = None):
        super().__init__(message)
        self.path = path
        self.line_number = line_number
        
    def __str__(self):
        base_msg = super().__str__()
        if self.path and self.line_number:
            base_msg += f" (File: {self.path}, line {self.line_number})"
        elif self.path:
            base_msg += f" (File: {self.path})"
        elif self.line_number:
            base_msg += f" (Line: {self.line_number})"
        return base_msg
