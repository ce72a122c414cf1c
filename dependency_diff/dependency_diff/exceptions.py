# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Custom exceptions for the dependency diff tool."""


class DependencyDiffError(Exception):
    """Base exception for dependency-diff related errors."""
    pass


class NameMismatchError(DependencyDiffError):
    """Exception raised when comparing versions of two different packages."""
    pass


class InvalidStateError(DependencyDiffError):
    """Exception raised when a diff is used in a state it can never legally reach."""
    pass


class UnsupportedFormatError(DependencyDiffError):
    """Exception raised for unknown output format names."""
    pass


class UnsupportedEnvironmentError(DependencyDiffError):
    """Exception raised for unknown requirement environment names."""
    pass


class InvalidAlignmentError(DependencyDiffError):
    """Exception raised when a table column has no valid alignment."""
    pass


class DuplicatePackageError(DependencyDiffError):
    """Exception raised when a snapshot lists the same package twice in one environment."""
    pass


class SnapshotError(DependencyDiffError):
    """Exception raised when a snapshot file cannot be loaded or validated."""
    pass
