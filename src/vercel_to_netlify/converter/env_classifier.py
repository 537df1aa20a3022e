"""
Env Classifier

Splits environment variables into browser-exposed (public) and server-only
(private) groups by framework naming convention.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple


@dataclass(frozen=True)
class PublicPrefix:
    """A name prefix a framework inlines into client-side bundles."""
    prefix: str
    label: str


PUBLIC_PREFIXES: Tuple[PublicPrefix, ...] = (
    PublicPrefix("NEXT_PUBLIC_", "Next.js"),
    PublicPrefix("VITE_", "Vite"),
    PublicPrefix("REACT_APP_", "Create React App"),
)


@dataclass
class ClassifiedEnv:
    public: List[Tuple[str, str]] = field(default_factory=list)
    private: List[Tuple[str, str]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.public) + len(self.private)

    @property
    def public_keys(self) -> List[str]:
        return [key for key, _ in self.public]

    @property
    def private_keys(self) -> List[str]:
        return [key for key, _ in self.private]


def is_public(key: str, prefixes: Sequence[PublicPrefix] = PUBLIC_PREFIXES) -> bool:
    return any(key.startswith(p.prefix) for p in prefixes)


def classify_env(
    variables: Dict[str, str],
    prefixes: Sequence[PublicPrefix] = PUBLIC_PREFIXES
) -> ClassifiedEnv:
    """Partition variables into public and private groups.

    Every name lands in exactly one group; each group keeps the mapping's
    insertion order.
    """
    classified = ClassifiedEnv()
    for key, value in variables.items():
        if is_public(key, prefixes):
            classified.public.append((key, value))
        else:
            classified.private.append((key, value))
    return classified
