"""
Text-generation client.

Thin async wrapper around the OpenAI chat model. One call, one completion,
no retries: any backend or transport failure aborts the request.

Dependencies: langchain_openai, langchain_core
System role: LLM boundary for the generation pipeline
"""

import logging
import time

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_openai import ChatOpenAI

from task_generator.configs.llm import LLMSettings
from task_generator.core.exceptions import GenerationFailed

logger = logging.getLogger(__name__)


class GenerationClient:
    """Sends system + user prompts to the chat model and returns the text."""

    def __init__(
        self,
        settings: LLMSettings | None = None,
        chat_model: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            settings: LLM settings (loaded from environment if None)
            chat_model: Pre-built chat model, mainly for tests
        """
        self._settings = settings or LLMSettings()
        self._chat_model = chat_model

    def _get_chat_model(self) -> BaseChatModel:
        # Built on first use so a missing API key fails the request, not startup
        if self._chat_model is None:
            self._chat_model = ChatOpenAI(
                model=self._settings.model,
                temperature=self._settings.temperature,
                api_key=self._settings.api_key,
                timeout=self._settings.request_timeout,
                max_retries=0,
            )
        return self._chat_model

    async def complete(self, messages: list[BaseMessage], stage: str = "task") -> str:
        """
        Return the completion text for a prompt.

        Args:
            messages: System and human messages
            stage: Pipeline stage label used in logs and errors

        Returns:
            str: Completion text

        Raises:
            GenerationFailed: Backend error or empty completion
        """
        start = time.time()
        logger.info(f"{__name__}:complete - START stage={stage}, messages={len(messages)}")

        try:
            response = await self._get_chat_model().ainvoke(messages)
        except Exception as e:
            logger.error(f"{__name__}:complete - {type(e).__name__}: {e}")
            raise GenerationFailed(str(e), stage=stage) from e

        content = response.content
        if isinstance(content, list):
            content = "".join(
                block.get("text", "") if isinstance(block, dict) else str(block)
                for block in content
            )
        if not content or not content.strip():
            logger.error(f"{__name__}:complete - Empty completion for stage={stage}")
            raise GenerationFailed("Text generation returned an empty completion", stage=stage)

        logger.info(
            f"{__name__}:complete - END stage={stage}, chars={len(content)}, "
            f"elapsed_ms={round((time.time() - start) * 1000, 2)}"
        )
        return content
