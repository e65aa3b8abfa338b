from translators.base import PassthroughTranslator, Translator
from translators.deepl import DeepLTranslator

__all__ = ["DeepLTranslator", "PassthroughTranslator", "Translator"]
