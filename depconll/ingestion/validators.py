# depconll/ingestion/validators.py
from typing import Any, Dict, List
import logging

from depconll.core.data_structures import NO_HEAD
from depconll.core.interfaces import BaseSentence

logger = logging.getLogger(__name__)


class ValidationResult:
    """DTO для результатов валидации."""

    def __init__(self, is_valid: bool, errors: List[str]):
        self.is_valid = is_valid
        self.errors = errors

    def __repr__(self):
        return f"ValidationResult(is_valid={self.is_valid}, errors={self.errors})"


class DataValidator:
    """
    Валидатор разобранных предложений.
    Кодек проверяет только отдельные строки, здесь - целостность предложения:
    нумерация ID, непустые поля, ссылки HEAD и число корней.
    """

    @staticmethod
    def validate_sentence(sentence: BaseSentence, strict: bool = True) -> ValidationResult:
        errors = []
        n = len(sentence) - 1

        if n == 0:
            errors.append("ERROR: Пустое предложение (только корень)")
            return ValidationResult(False, errors)

        roots = 0
        for idx, token in enumerate(sentence.tokens(), 1):
            # 1. ID должны идти подряд 1..N
            if token.id != idx:
                errors.append(f"Token {token.id}: ожидался ID {idx}")

            # 2. Обязательные поля
            for name in ("word", "lemma", "ctag", "tag"):
                if not getattr(token, name):
                    errors.append(f"Token {token.id}: Пустое поле {name.upper()}")

            # 3. HEAD (только у выходных токенов)
            head = getattr(token, "head", None)
            if head is None or head == NO_HEAD:
                continue
            if head == 0:
                roots += 1
            elif not 0 < head <= n:
                errors.append(f"Token {token.id}: HEAD {head} ссылается на несуществующий ID")
            elif head == token.id:
                errors.append(f"Token {token.id}: HEAD указывает на сам токен")

        # 4. Структурная проверка: ровно один токен под корнем
        has_heads = any(getattr(t, "head", NO_HEAD) != NO_HEAD for t in sentence.tokens())
        if strict and has_heads and roots != 1:
            errors.append(f"ERROR: Найдено {roots} корней (ожидается 1)")

        return ValidationResult(len(errors) == 0, errors)

    @staticmethod
    def validate_batch(sentences: List[BaseSentence], strict: bool = True) -> Dict[str, Any]:
        """Агрегированная статистика валидации набора предложений."""
        stats = {
            "total": len(sentences),
            "valid": 0,
            "invalid": 0,
            "errors": []
        }

        for num, sent in enumerate(sentences, 1):
            res = DataValidator.validate_sentence(sent, strict)
            if res.is_valid:
                stats["valid"] += 1
            else:
                stats["invalid"] += 1
                stats["errors"].append({"id": num, "issues": res.errors})

        logger.debug(f"Validated {stats['total']} sentences, invalid: {stats['invalid']}")
        return stats
