"""Installed package lookups used by the runtime dependency checks."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

import importlib
from importlib import metadata
from typing import Iterable, List, Optional, Tuple

from packaging import version
from packaging.specifiers import SpecifierSet

# (install_name, import_name, version_spec), e.g. ("PyYAML", "yaml", ">=5.1")
PackageRequirement = Tuple[str, str, str]


def get_package_version(package_name: str) -> Optional[str]:
    """Return the installed version of a distribution, or None if it is not installed.

    ``package_name`` is the distribution name (``PyYAML``), not the import name.
    """
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Check if installed package meets version requirement.

    Parameters
    ----------
    package_name : str
        Distribution name of the package
    version_spec : str
        Version specification (e.g., ">=3.0.0")

    Returns
    -------
    tuple
        (meets_requirement, installed_version)

    """
    installed_version = get_package_version(package_name)
    if not installed_version:
        return False, None
    return version.parse(installed_version) in SpecifierSet(version_spec), installed_version


def find_unmet_requirements(
    packages: Iterable[PackageRequirement],
) -> Tuple[List[Tuple[str, str]], List[Tuple[str, str, str]], Optional[ImportError]]:
    """Find required packages that cannot be imported or are too old.

    Parameters
    ----------
    packages : iterable of (install_name, import_name, version_spec)
        Requirements to check; an empty version_spec accepts any version

    Returns
    -------
    tuple
        ``(missing, version_mismatches, first_import_error)`` where missing holds
        ``(install_name, version_spec)`` and version_mismatches holds
        ``(install_name, version_spec, installed_version)``

    """
    missing: List[Tuple[str, str]] = []
    mismatches: List[Tuple[str, str, str]] = []
    first_error: Optional[ImportError] = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            first_error = first_error or e
            continue

        if version_spec:
            meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
            if not meets_requirement:
                mismatches.append((install_name, version_spec, installed_version or "unknown"))

    return missing, mismatches, first_error
