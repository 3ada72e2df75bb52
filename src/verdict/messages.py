"""Message catalogs used to describe expectations and outcomes."""
from __future__ import annotations

from typing import Dict, Mapping

ENGLISH: Dict[str, str] = {
    "but.expected": "but %s was expected",
    "timeout": "%s\n   timeout: test took more than %s seconds to complete",
    "unexpected.exception": "%s\n   raised unexpected exception %s with message %s",
    "connector.or": " or ",
    "failed": "TEST FAILED!",
    "passed": "TEST PASSED SUCCESSFULLY!",
    "expected": "%s was expected",
    "obtained": "%s was obtained",
    "expected.result": "expected result was %s",
    "obtained.result": "obtained result was %s",
    "no.exception.basic": "expected exception but none was thrown. %s was expected",
    "wrong.exception.type.basic": "test threw the exception %s",
    "wrong.exception.message.basic": "test threw expected exception type %s but message was %s",
    "wrong.exception.and.message.basic": "test threw exception %s with message %s",
    "exception.description": "the exception %s",
    "exception.with.message.description": "the exception %s with message %s",
    "exception.with.predicate.description": "the exception %s with message satisfying: %s",
    "exception.oneof.description": "one of exceptions %s",
    "exception.oneof.with.message.description": "one of exceptions %s with message %s",
    "exception.oneof.with.predicate.description": "one of exceptions %s with message satisfying: %s",
    "exception.except.description": "any exception except %s",
    "exception.except.with.message.description": "any exception except %s, with message %s",
    "exception.except.with.predicate.description": "any exception except %s, with message satisfying: %s",
    "detail.expected_exact_message": "expected message was %s",
    "detail.expected_predicate": "message should satisfy: %s",
    "detail.unnamed_predicate": "the given predicate",
    "property.failure.base": "does not verify expected property",
    "property.failure.suffix": ": %s",
    "property.must.be.true": "should be true",
    "property.must.be.false": "should be false",
    "property.was.true": "property was true",
    "property.was.false": "property was false",
    "suite.for": "Tests for %s",
    "results.passed": "Passed",
    "results.failed": "Failed",
    "results.total": "Total",
    "results.detail": "Detail",
    "summary.title": "Overall Summary",
    "summary.suites.run": "Suites run: %d",
    "summary.total.tests": "Total tests: %d",
    "summary.success.rate": "Success rate: %.2f%%",
}

SPANISH: Dict[str, str] = {
    "but.expected": "pero se esperaba %s",
    "timeout": "%s\n   tiempo excedido: la prueba tardó más de %s segundos en completarse",
    "unexpected.exception": "%s\n   se lanzó la excepción inesperada %s con mensaje %s",
    "connector.or": " o ",
    "failed": "¡PRUEBA FALLIDA!",
    "passed": "¡PRUEBA SUPERADA CON ÉXITO!",
    "expected": "%s se esperaba",
    "obtained": "%s se obtuvo",
    "expected.result": "el resultado esperado era %s",
    "obtained.result": "el resultado obtenido fue %s",
    "no.exception.basic": "se esperaba una excepción pero no se lanzó ninguna. %s se esperaba",
    "wrong.exception.type.basic": "la prueba lanzó la excepción %s",
    "wrong.exception.message.basic": "la prueba lanzó el tipo de excepción esperado %s pero el mensaje fue %s",
    "wrong.exception.and.message.basic": "la prueba lanzó la excepción %s con mensaje %s",
    "exception.description": "la excepción %s",
    "exception.with.message.description": "la excepción %s con mensaje %s",
    "exception.with.predicate.description": "la excepción %s con mensaje satisfaciendo: %s",
    "exception.oneof.description": "una de las excepciones %s",
    "exception.oneof.with.message.description": "una de las excepciones %s con mensaje %s",
    "exception.oneof.with.predicate.description": "una de las excepciones %s con mensaje satisfaciendo: %s",
    "exception.except.description": "cualquier excepción excepto %s",
    "exception.except.with.message.description": "cualquier excepción excepto %s, con mensaje %s",
    "exception.except.with.predicate.description": "cualquier excepción excepto %s, con mensaje satisfaciendo: %s",
    "detail.expected_exact_message": "se esperaba el mensaje %s",
    "detail.expected_predicate": "el mensaje debía satisfacer: %s",
    "detail.unnamed_predicate": "el predicado indicado",
    "property.failure.base": "no verifica la propiedad esperada",
    "property.failure.suffix": ": %s",
    "property.must.be.true": "debe ser verdadera",
    "property.must.be.false": "debe ser falsa",
    "property.was.true": "la propiedad fue verdadera",
    "property.was.false": "la propiedad fue falsa",
    "suite.for": "Pruebas para %s",
    "results.passed": "Superadas",
    "results.failed": "Fallidas",
    "results.total": "Total",
    "results.detail": "Detalle",
    "summary.title": "Resumen general",
    "summary.suites.run": "Suites ejecutadas: %d",
    "summary.total.tests": "Total de pruebas: %d",
    "summary.success.rate": "Tasa de éxito: %.2f%%",
}

FRENCH: Dict[str, str] = {
    "but.expected": "mais %s était attendu",
    "timeout": "%s\n   délai dépassé : le test a mis plus de %s secondes à se terminer",
    "unexpected.exception": "%s\n   a levé l'exception inattendue %s avec le message %s",
    "connector.or": " ou ",
    "failed": "ÉCHEC DU TEST !",
    "passed": "TEST RÉUSSI AVEC SUCCÈS !",
    "expected": "%s était attendu",
    "obtained": "%s a été obtenu",
    "expected.result": "le résultat attendu était %s",
    "obtained.result": "le résultat obtenu était %s",
    "no.exception.basic": "exception attendue mais aucune n'a été levée. %s était attendu",
    "wrong.exception.type.basic": "le test a levé l'exception %s",
    "wrong.exception.message.basic": "le test a levé le type d'exception attendu %s mais le message était %s",
    "wrong.exception.and.message.basic": "le test a levé l'exception %s avec le message %s",
    "exception.description": "l'exception %s",
    "exception.with.message.description": "l'exception %s avec le message %s",
    "exception.with.predicate.description": "l'exception %s avec message satisfaisant : %s",
    "exception.oneof.description": "une des exceptions %s",
    "exception.oneof.with.message.description": "une des exceptions %s avec le message %s",
    "exception.oneof.with.predicate.description": "une des exceptions %s avec message satisfaisant : %s",
    "exception.except.description": "toute exception sauf %s",
    "exception.except.with.message.description": "toute exception sauf %s, avec le message %s",
    "exception.except.with.predicate.description": "toute exception sauf %s, avec message satisfaisant : %s",
    "detail.expected_exact_message": "le message attendu était %s",
    "detail.expected_predicate": "le message devait satisfaire : %s",
    "detail.unnamed_predicate": "le prédicat indiqué",
    "property.failure.base": "ne vérifie pas la propriété attendue",
    "property.failure.suffix": " : %s",
    "property.must.be.true": "doit être vraie",
    "property.must.be.false": "doit être fausse",
    "property.was.true": "la propriété était vraie",
    "property.was.false": "la propriété était fausse",
    "suite.for": "Tests pour %s",
    "results.passed": "Réussis",
    "results.failed": "Échoués",
    "results.total": "Total",
    "results.detail": "Détail",
    "summary.title": "Résumé Général",
    "summary.suites.run": "Suites exécutées: %d",
    "summary.total.tests": "Total des tests: %d",
    "summary.success.rate": "Taux de réussite: %.2f%%",
}

CATALOGS: Mapping[str, Mapping[str, str]] = {
    "en": ENGLISH,
    "es": SPANISH,
    "fr": FRENCH,
}


def get_message(key: str, language: str) -> str:
    """Pattern for ``key`` in ``language``; English, then the key, as fallbacks."""

    catalog = CATALOGS.get(language, ENGLISH)
    if key in catalog:
        return catalog[key]
    return ENGLISH.get(key, key)
