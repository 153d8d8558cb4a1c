"""Question-Set Generator - Estrategias de IA e fallback deterministico."""

from __future__ import annotations

import asyncio
import json
import logging
import re
from typing import Any, Protocol

import config

from ..errors import InvalidInputError, MalformedResponseError, ProviderUnavailableError
from ..llm import LLMClientFactory
from ..models.enums import GeneratedBy
from ..models.schemas import OPTIONS_PER_QUESTION, QUESTIONS_PER_QUIZ, Question, QuestionSet
from ..prompts import (
    FALLBACK_BUCKETS,
    GENERIC_QUESTION_TEMPLATES,
    QUIZ_GENERATION_PROMPT,
    QUIZ_SYSTEM_PROMPT,
)

logger = logging.getLogger(__name__)

_OBJECT_START = re.compile(r"\{")


class QuestionStrategy(Protocol):
    """Contrato comum: topico -> QuestionSet.

    Raises:
        ProviderUnavailableError: provedor ausente ou chamada falhou
        MalformedResponseError: saida do provedor invalida
    """

    generated_by: GeneratedBy

    async def generate(self, topic: str) -> QuestionSet: ...


# =============================================================================
# FALLBACK
# =============================================================================


class FallbackQuestionStrategy:
    """Gerador deterministico, sem I/O. Nunca falha.

    O topico e comparado (case-insensitive) com os buckets de palavras-chave;
    sem match, usa o template generico interpolando o topico.

    Example:
        >>> qs = FallbackQuestionStrategy().build("JavaScript basics")
        >>> qs.answers["1"]
        'Document Object Model'
    """

    generated_by = GeneratedBy.FALLBACK

    def build(self, topic: str) -> QuestionSet:
        topic_lower = topic.lower()

        for keywords, questions, answers in FALLBACK_BUCKETS:
            if any(keyword in topic_lower for keyword in keywords):
                return QuestionSet(
                    questions=[
                        Question(id=i, text=text, options=list(options))
                        for i, (text, options) in enumerate(questions, 1)
                    ],
                    answers=dict(answers),
                )

        return self._build_generic(topic)

    def _build_generic(self, topic: str) -> QuestionSet:
        questions = []
        answers = {}
        for i, (text, options) in enumerate(GENERIC_QUESTION_TEMPLATES, 1):
            rendered = [option.format(topic=topic) for option in options]
            questions.append(Question(id=i, text=text.format(topic=topic), options=rendered))
            # Primeira alternativa e a correta por construcao
            answers[str(i)] = rendered[0]
        return QuestionSet(questions=questions, answers=answers)

    async def generate(self, topic: str) -> QuestionSet:
        return self.build(topic)


# =============================================================================
# IA
# =============================================================================


def extract_json_object(text: str) -> dict[str, Any]:
    """Retorna o primeiro objeto JSON bem formado contido no texto.

    Raises:
        MalformedResponseError: Se nao ha objeto JSON ou nenhum candidato parseia
    """
    if not text or "{" not in text:
        raise MalformedResponseError("No JSON found in AI response")

    decoder = json.JSONDecoder()
    for match in _OBJECT_START.finditer(text):
        try:
            data, _ = decoder.raw_decode(text, match.start())
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data

    raise MalformedResponseError("Invalid JSON response from AI")


def parse_question_set(text: str) -> QuestionSet:
    """Valida a resposta bruta da IA e normaliza para QuestionSet.

    Os IDs sao reatribuidos pela posicao (1-N), ignorando qualquer ``id``
    enviado pela IA. O gabarito e buscado pelo ID original da IA e, se ausente,
    pela posicao; o valor precisa ser uma das 4 alternativas.
    """
    data = extract_json_object(text)

    raw_questions = data.get("questions")
    if not isinstance(raw_questions, list) or len(raw_questions) != QUESTIONS_PER_QUIZ:
        raise MalformedResponseError(
            f"AI response does not contain {QUESTIONS_PER_QUIZ} questions"
        )

    raw_answers = data.get("answers")
    if not isinstance(raw_answers, dict):
        raise MalformedResponseError("AI response does not contain answers")

    questions: list[Question] = []
    answers: dict[str, str] = {}

    for index, raw in enumerate(raw_questions, 1):
        if not isinstance(raw, dict):
            raise MalformedResponseError(f"Question {index} is malformed")

        text_value = raw.get("text")
        options = raw.get("options")
        if (
            not isinstance(text_value, str)
            or not text_value.strip()
            or not isinstance(options, list)
            or len(options) != OPTIONS_PER_QUESTION
            or not all(isinstance(option, str) for option in options)
        ):
            raise MalformedResponseError(f"Question {index} is malformed")

        # Gabarito vem indexado pelos ids da IA; posicao so como ultimo recurso
        raw_id = raw.get("id")
        correct = raw_answers.get(str(raw_id)) if raw_id is not None else None
        if correct is None:
            correct = raw_answers.get(str(index))
        if correct not in options:
            raise MalformedResponseError(f"Question {index} has no valid answer")

        questions.append(Question(id=index, text=text_value, options=list(options)))
        answers[str(index)] = correct

    return QuestionSet(questions=questions, answers=answers)


class AIQuestionStrategy:
    """Gera questoes via provedor de IA (uma tentativa, com timeout).

    Example:
        >>> strategy = AIQuestionStrategy()
        >>> if strategy.is_available():
        ...     qs = await strategy.generate("Photosynthesis")
    """

    generated_by = GeneratedBy.AI

    def __init__(
        self,
        llm_factory: LLMClientFactory | None = None,
        timeout: float | None = None,
    ):
        self.llm_factory = llm_factory or LLMClientFactory()
        self.timeout = config.AI_TIMEOUT_SECONDS if timeout is None else timeout

    def is_available(self) -> bool:
        return self.llm_factory.is_configured()

    @staticmethod
    def build_prompt(topic: str) -> str:
        return QUIZ_GENERATION_PROMPT.format(
            topic=topic,
            num_questions=QUESTIONS_PER_QUIZ,
            num_options=OPTIONS_PER_QUESTION,
        )

    @staticmethod
    def _response_text(response: Any) -> str:
        parts = []
        for block in getattr(response, "content", None) or []:
            if getattr(block, "type", "text") == "text" and getattr(block, "text", None):
                parts.append(block.text)
        return "".join(parts)

    async def complete(self, prompt: str) -> str:
        """Chama o provedor e devolve o texto da resposta.

        Raises:
            ProviderUnavailableError: sem credencial, timeout ou erro na chamada
        """
        client = self.llm_factory.create_client()
        factory = self.llm_factory

        try:
            response = await asyncio.wait_for(
                client.messages.create(
                    model=factory.model,
                    max_tokens=factory.max_tokens,
                    temperature=factory.temperature,
                    system=QUIZ_SYSTEM_PROMPT,
                    messages=[{"role": "user", "content": prompt}],
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise ProviderUnavailableError(
                f"AI provider timed out after {self.timeout}s"
            ) from e
        except Exception as e:
            raise ProviderUnavailableError(f"AI provider call failed: {e}") from e

        return self._response_text(response)

    async def generate(self, topic: str) -> QuestionSet:
        text = await self.complete(self.build_prompt(topic))
        logger.debug("Resposta da IA recebida (%d chars)", len(text))
        return parse_question_set(text)


# =============================================================================
# POLITICA DO CHAMADOR
# =============================================================================


class QuizGenerator:
    """Tenta a IA (se configurada) e cai no fallback em qualquer falha.

    A geracao sempre tem sucesso quando o topico e valido.
    """

    def __init__(
        self,
        ai_strategy: AIQuestionStrategy | None = None,
        fallback_strategy: FallbackQuestionStrategy | None = None,
    ):
        self.ai_strategy = ai_strategy or AIQuestionStrategy()
        self.fallback_strategy = fallback_strategy or FallbackQuestionStrategy()

    async def generate(self, topic: str) -> tuple[QuestionSet, GeneratedBy]:
        """Gera o conjunto de questoes.

        Args:
            topic: Topico informado pelo usuario (nao vazio)

        Returns:
            Tuple de (question_set, generated_by)

        Raises:
            InvalidInputError: Topico ausente ou vazio
        """
        if not isinstance(topic, str) or not topic.strip():
            raise InvalidInputError("Topic is required")
        topic = topic.strip()

        if self.ai_strategy.is_available():
            try:
                question_set = await self.ai_strategy.generate(topic)
                logger.info("Quiz gerado pela IA: topic=%r", topic)
                return question_set, GeneratedBy.AI
            except (ProviderUnavailableError, MalformedResponseError) as e:
                logger.warning("IA falhou (%s), usando fallback: %s", e.kind, e.message)
        else:
            logger.info("Provedor de IA nao configurado, usando fallback")

        question_set = await self.fallback_strategy.generate(topic)
        logger.info("Quiz gerado pelo fallback: topic=%r", topic)
        return question_set, GeneratedBy.FALLBACK
