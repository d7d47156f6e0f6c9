# depconll/ingestion/loader.py
import logging
from pathlib import Path
from typing import Any, Dict, Generator, List, Optional

from depconll import config as cfg_module
from depconll.core.interfaces import BaseSentence
from depconll.ingestion.validators import DataValidator
from depconll.reader import iter_sentences

logger = logging.getLogger(__name__)


class CorpusLoader:
    """
    Потоковая загрузка корпусов CoNLL с валидацией "на лету".
    """

    def __init__(self, cfg: Optional[Dict[str, Any]] = None):
        self.config = dict(cfg_module.DEFAULT_CONFIG)
        if cfg:
            self.config.update(cfg)
        self.schema = self.config["schema"]
        self.encoding = self.config["encoding"]
        # Определение уровня строгости валидации
        self.strict_validation = self.config["validation_level"] == "strict"
        self.skipped = 0

    def load_stream(self, file_paths: List[Path]) -> Generator[BaseSentence, None, None]:
        """
        Потоковый генератор валидированных предложений.
        Невалидные предложения в lenient режиме пропускаются с предупреждением,
        в strict режиме - ошибка. Ошибки формата строк всегда фатальны.
        """
        for fp in file_paths:
            fp = Path(fp)
            logger.info(f"Парсинг файла: {fp.name}")
            try:
                with open(fp, "r", encoding=self.encoding) as f:
                    for num, sentence in enumerate(iter_sentences(f, self.schema), 1):
                        val_res = DataValidator.validate_sentence(sentence, strict=self.strict_validation)

                        if val_res.is_valid:
                            yield sentence
                        elif self.strict_validation:
                            raise ValueError(f"Invalid sentence #{num} in {fp.name}: {val_res.errors}")
                        else:
                            self.skipped += 1
                            logger.warning(f"Skipped invalid sentence #{num} in {fp.name}: {val_res.errors}")

            except Exception as e:
                logger.error(f"Критическая ошибка при чтении {fp}: {e}")
                raise
