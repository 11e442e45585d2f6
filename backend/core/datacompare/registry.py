# datacompare/registry.py
"""
Registro central de directivas, matchers y transformaciones.
"""

from typing import Dict, Iterable, List

from .directives.base_directive import CompareDirective
from .errors import DuplicateRegistrationError, UnknownRegistrationError
from .matchers.base_matcher import CompareMatcher
from .transforms.base_transform import CompareTransform


class CompareRegistry:
    """Registro y consulta de extensiones por nombre."""

    def __init__(self):
        self._directives: Dict[str, CompareDirective] = {}
        self._matchers: Dict[str, CompareMatcher] = {}
        self._transforms: Dict[str, CompareTransform] = {}

    # Directivas
    def register_directive(self, directive: CompareDirective):
        """Registra una directiva."""
        if directive.name in self._directives:
            raise DuplicateRegistrationError("Directiva", directive.name)
        self._directives[directive.name] = directive

    def register_directives(self, directives: Iterable[CompareDirective]):
        """Registra varias directivas en orden."""
        for directive in directives:
            self.register_directive(directive)

    def get_directive(self, name: str) -> CompareDirective:
        if name not in self._directives:
            raise UnknownRegistrationError("Directiva", name)
        return self._directives[name]

    def has_directive(self, name: str) -> bool:
        return name in self._directives

    def get_directive_names(self) -> List[str]:
        return list(self._directives)

    # Matchers
    def register_matcher(self, name: str, matcher: CompareMatcher):
        """Registra un matcher."""
        if name in self._matchers:
            raise DuplicateRegistrationError("Matcher", name)
        self._matchers[name] = matcher

    def get_matcher(self, name: str) -> CompareMatcher:
        if name not in self._matchers:
            raise UnknownRegistrationError("Matcher", name)
        return self._matchers[name]

    def has_matcher(self, name: str) -> bool:
        return name in self._matchers

    def get_matcher_names(self) -> List[str]:
        return list(self._matchers)

    # Transformaciones
    def register_transform(self, transform: CompareTransform):
        """Registra una transformación."""
        if transform.name in self._transforms:
            raise DuplicateRegistrationError("Transformación", transform.name)
        self._transforms[transform.name] = transform

    def get_transform(self, name: str) -> CompareTransform:
        if name not in self._transforms:
            raise UnknownRegistrationError("Transformación", name)
        return self._transforms[name]

    def has_transform(self, name: str) -> bool:
        return name in self._transforms

    def get_transform_names(self) -> List[str]:
        return list(self._transforms)

    def list_directives(self) -> List[Dict]:
        """Lista las directivas registradas con su descripción."""
        return [
            {
                "name": name,
                "description": directive.description,
                "class": directive.__class__.__name__
            }
            for name, directive in self._directives.items()
        ]

    def clear(self):
        """Vacía los tres registros (útil para aislar tests)."""
        self._directives.clear()
        self._matchers.clear()
        self._transforms.clear()
