# datacompare/comparer.py
"""
Comparador recursivo de árboles de datos (objetos, arrays y escalares).

Maneja:
    - Objetos (coincidencia parcial y exacta)
    - Arrays (ordenados, sin orden y parciales)
    - Escalares (igualdad estricta)
    - Directivas {{compare:...}}
    - Palabras clave (exact, ignore, ignoreRest, ignoreOrder)
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from .errors import CompareErrors
from .models import (
    COMPARE_KEYWORDS, CompareContext, CompareDetail, CompareError, CompareErrorType,
    CompareOptions, DirectiveRequest, IgnorePathConfig, MatchContext, UNDEFINED, _join_path
)
from .parser import CompareParser
from .registry import CompareRegistry

logger = logging.getLogger(__name__)

_EXACT = COMPARE_KEYWORDS["EXACT"]
_IGNORE = COMPARE_KEYWORDS["IGNORE"]
_IGNORE_REST = COMPARE_KEYWORDS["IGNORE_REST"]
_IGNORE_ORDER = COMPARE_KEYWORDS["IGNORE_ORDER"]
_ARRAY_KEYWORDS = (_IGNORE_REST, _IGNORE_ORDER)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_mapping(value: Any) -> bool:
    return isinstance(value, dict)


def _strict_equals(expected: Any, actual: Any) -> bool:
    """Igualdad sin coerciones: un booleano nunca es igual a un número."""
    if isinstance(expected, bool) or isinstance(actual, bool):
        return isinstance(expected, bool) and isinstance(actual, bool) and expected == actual
    return expected == actual


def _has_keyword(items: Sequence[Any], keyword: str) -> bool:
    return any(isinstance(item, str) and item == keyword for item in items)


def _index_segment(index: int) -> str:
    return f"[{index}]"


class RecursiveComparer:
    """
    Recorre expected y actual en profundidad acumulando errores y detalles.

    El estado (errores, detalles, profundidad) pertenece a la instancia y solo
    se reinicia en compare(); las comparaciones de prueba de arrays sin orden
    usan instancias nuevas.
    """

    def __init__(self, parser: CompareParser, registry: CompareRegistry):
        self.parser = parser
        self.registry = registry
        self._errors: List[CompareError] = []
        self._details: List[CompareDetail] = []
        self._current_depth = 0
        self._max_depth_reached = 0

    def compare(
        self,
        expected: Any,
        actual: Any,
        path: List[str],
        context: CompareContext,
        options: CompareOptions
    ) -> Dict[str, Any]:
        """
        Compara dos valores recursivamente.

        Returns:
            Diccionario con 'errors', 'details' y 'max_depth_reached'
        """
        self._errors = []
        self._details = []
        self._current_depth = 0
        self._max_depth_reached = 0

        self._compare_internal(expected, actual, list(path), context, options)

        return {
            "errors": self._errors,
            "details": self._details,
            "max_depth_reached": self._max_depth_reached
        }

    def _compare_internal(
        self,
        expected: Any,
        actual: Any,
        path: List[str],
        context: CompareContext,
        options: CompareOptions
    ):
        self._current_depth += 1

        try:
            self._max_depth_reached = max(self._max_depth_reached, self._current_depth)

            if options.max_depth and self._current_depth > options.max_depth:
                self._errors.append(
                    CompareErrors.max_depth_exceeded(path, expected, actual, options.max_depth)
                )
                return

            # Presupuesto de errores agotado: se corta sin registrar nada
            if options.max_errors and len(self._errors) >= options.max_errors:
                return

            if options.ignore_paths:
                matched = self._should_ignore_path(path, options.ignore_paths)
                if matched is not None:
                    reason = ", ".join(matched.doc) if matched.doc else "sin motivo"
                    self._add_detail(path, True, expected, actual, f"Ignorado por ignorePath: {reason}")
                    return

            if expected is None or expected is UNDEFINED:
                if expected is actual:
                    self._add_detail(path, True, expected, actual)
                else:
                    self._errors.append(CompareErrors.value_mismatch(path, expected, actual))
                return

            if isinstance(expected, str):
                if expected == _IGNORE:
                    self._add_detail(path, True, expected, actual, "Ignorado por directiva")
                    return

                if self.parser.is_directive(expected):
                    self._compare_with_directive(expected, actual, path, context)
                    return

            if _is_sequence(expected):
                self._compare_arrays(expected, actual, path, context, options)
                return

            if _is_mapping(expected):
                self._compare_objects(expected, actual, path, context, options)
                return

            self._compare_primitives(expected, actual, path)
        except RecursionError:
            # Sin max_depth configurado el límite lo pone el intérprete
            self._errors.append(CompareErrors.recursion_limit_exceeded(path, expected, actual))
        finally:
            self._current_depth -= 1

    def _compare_with_directive(
        self,
        directive_text: str,
        actual: Any,
        path: List[str],
        context: CompareContext
    ):
        """Evalúa una directiva; cualquier excepción queda registrada como error."""
        try:
            parsed = self.parser.parse(directive_text)
            directive = self.registry.get_directive(parsed.action)

            matcher = directive.create_matcher(
                DirectiveRequest(directive=parsed, context=context, registry=self.registry)
            )

            match_context = MatchContext(
                path=list(path),
                actual=actual,
                expected=directive_text,
                compare_context=context
            )
            result = matcher(actual, directive_text, match_context)

            if result.success:
                self._add_detail(path, True, directive_text, actual, result.details)
                return

            error = CompareErrors.pattern_mismatch(path, directive_text, actual, result.error)
            if result.error_type is not None and result.error_type != error.type:
                error = CompareError(
                    path=error.path,
                    type=result.error_type,
                    expected=error.expected,
                    actual=error.actual,
                    message=error.message
                )
            self._errors.append(error)

        except Exception as e:
            logger.debug(f"Directiva '{directive_text}' falló en {_join_path(path)}: {e}")
            self._errors.append(
                CompareErrors.directive_failed(path, directive_text, actual, str(e))
            )

    def _compare_objects(
        self,
        expected: Dict[str, Any],
        actual: Any,
        path: List[str],
        context: CompareContext,
        options: CompareOptions
    ):
        if not _is_mapping(actual):
            self._errors.append(CompareErrors.type_mismatch(path, "object", actual))
            return

        is_exact_mode = expected.get(_EXACT) is True or options.strict_mode is True

        for key, expected_value in expected.items():
            if key == _EXACT:
                continue

            key_path = path + [str(key)]

            if key not in actual:
                self._errors.append(CompareErrors.missing_property(key_path, key, expected_value))
                continue

            self._compare_internal(expected_value, actual[key], key_path, context, options)

        if is_exact_mode or not options.ignore_extra_properties:
            for key, actual_value in actual.items():
                if key not in expected:
                    self._errors.append(
                        CompareErrors.extra_property(path + [str(key)], key, actual_value)
                    )

    def _compare_arrays(
        self,
        expected: Sequence[Any],
        actual: Any,
        path: List[str],
        context: CompareContext,
        options: CompareOptions
    ):
        if not _is_sequence(actual):
            self._errors.append(CompareErrors.type_mismatch(path, "array", actual))
            return

        has_ignore_order = _has_keyword(expected, _IGNORE_ORDER)
        has_ignore_rest = _has_keyword(expected, _IGNORE_REST)

        # Las palabras clave estructurales nunca se comparan como datos
        filtered = [
            item for item in expected
            if not (isinstance(item, str) and item in _ARRAY_KEYWORDS)
        ]

        if has_ignore_order:
            self._compare_arrays_unordered(filtered, actual, path, context, options)
        elif has_ignore_rest:
            self._compare_arrays_partial(filtered, actual, path, context, options)
        else:
            self._compare_arrays_ordered(filtered, actual, path, context, options)

    def _compare_arrays_ordered(
        self,
        expected: List[Any],
        actual: Sequence[Any],
        path: List[str],
        context: CompareContext,
        options: CompareOptions
    ):
        # La diferencia de longitud se registra pero se sigue con el prefijo común
        if len(expected) != len(actual):
            self._errors.append(CompareErrors.array_length_mismatch(path, len(expected), len(actual)))

        for i in range(min(len(expected), len(actual))):
            expected_item = expected[i]
            actual_item = actual[i]
            item_path = path + [_index_segment(i)]

            if isinstance(expected_item, str) and expected_item == _IGNORE:
                self._add_detail(item_path, True, expected_item, actual_item, "Ignorado por directiva")
                continue

            self._compare_internal(expected_item, actual_item, item_path, context, options)

    def _compare_arrays_unordered(
        self,
        expected: List[Any],
        actual: Sequence[Any],
        path: List[str],
        context: CompareContext,
        options: CompareOptions
    ):
        if len(expected) != len(actual):
            self._errors.append(CompareErrors.array_length_mismatch(path, len(expected), len(actual)))
            return

        consumed = set()

        for i, expected_item in enumerate(expected):
            item_path = path + [_index_segment(i)]
            found = False

            for j, actual_item in enumerate(actual):
                if j in consumed:
                    continue

                # La prueba corre en la ruta del elemento, no en la raíz: los ignorePaths absolutos aplican
                if self._test_match(expected_item, actual_item, item_path, context, options):
                    consumed.add(j)
                    self._add_detail(item_path, True, expected_item, actual_item, "Coincide en array sin orden")
                    found = True
                    break

            if not found:
                self._errors.append(CompareErrors.array_element_unmatched(item_path, expected_item))

    def _compare_arrays_partial(
        self,
        expected: List[Any],
        actual: Sequence[Any],
        path: List[str],
        context: CompareContext,
        options: CompareOptions
    ):
        if len(actual) < len(expected):
            self._errors.append(CompareErrors.array_too_short(path, len(expected), len(actual)))
            return

        # Los elementos sobrantes de actual no se examinan
        for i, expected_item in enumerate(expected):
            self._compare_internal(expected_item, actual[i], path + [_index_segment(i)], context, options)

    def _test_match(
        self,
        expected: Any,
        actual: Any,
        path: List[str],
        context: CompareContext,
        options: CompareOptions
    ) -> bool:
        """Comparación de prueba aislada: no toca los registros de esta instancia."""
        trial = RecursiveComparer(self.parser, self.registry)
        result = trial.compare(expected, actual, path, context, options)
        return not result["errors"]

    def _compare_primitives(self, expected: Any, actual: Any, path: List[str]):
        if _strict_equals(expected, actual):
            self._add_detail(path, True, expected, actual)
        else:
            self._errors.append(CompareErrors.value_mismatch(path, expected, actual))

    def _add_detail(
        self,
        path: List[str],
        passed: bool,
        expected: Any,
        actual: Any,
        message: Optional[str] = None
    ):
        self._details.append(
            CompareDetail(
                path=_join_path(path),
                passed=passed,
                expected=expected,
                actual=actual,
                message=message
            )
        )

    @staticmethod
    def _normalize_segment(segment: Any) -> str:
        # Los índices numéricos equivalen al segmento "[n]"
        if isinstance(segment, int) and not isinstance(segment, bool):
            return _index_segment(segment)
        return str(segment)

    def _should_ignore_path(
        self,
        current_path: List[str],
        ignore_paths: Sequence[IgnorePathConfig]
    ) -> Optional[IgnorePathConfig]:
        """
        Devuelve la configuración que coincide con la ruta actual, si existe.

        Una ruta coincide si es prefijo de la actual segmento a segmento;
        '*' coincide con cualquier segmento (incluidos índices como '[0]').
        """
        for ignore_path in ignore_paths:
            segments = [self._normalize_segment(segment) for segment in ignore_path.path]

            if len(segments) > len(current_path):
                continue

            if all(
                segment == "*" or segment == current_path[i]
                for i, segment in enumerate(segments)
            ):
                return ignore_path

        return None
