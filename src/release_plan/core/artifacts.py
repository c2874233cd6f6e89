"""Artifact stability classification.

Artifact keys may carry a major-version line suffix, e.g.
``google-cloud-core-v2``. A suffix with a trailing qualifier
(``-v2beta``, ``-v1alpha3``) marks a line that has not reached 1.0.0 yet.
"""

from __future__ import annotations

import re

_VERSIONED_ARTIFACT_PATTERN = re.compile(r"^.*-(v\d+[^-]*)$")
_VERSION_QUALIFIER_PATTERN = re.compile(r"^v\d+(.*)$")


def is_stable_artifact(artifact: str) -> bool:
    """Return True if ``artifact`` should be considered stable.

    A hyphen inside the qualifier (``core-v2-beta``) takes the key out of
    the suffix pattern, so such keys are classified as stable.

    Args:
        artifact: Artifact key from the versions manifest

    Returns:
        False only for keys ending in ``-v<digits><qualifier>``
    """
    match = _VERSIONED_ARTIFACT_PATTERN.match(artifact)
    if not match:
        return True

    qualifier = _VERSION_QUALIFIER_PATTERN.match(match.group(1))
    return not (qualifier and qualifier.group(1))
