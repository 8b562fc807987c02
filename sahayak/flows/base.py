"""Base flow for Sahayak.

A flow is one named input → output pipeline: validate input, render prompt,
generate (optionally through the tool loop), validate output.
"""

import time
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel

from sahayak.core.errors import SahayakError, ValidationError
from sahayak.core.logging import logger
from sahayak.core.prompts import PromptTemplate, render
from sahayak.core.schema import validate
from sahayak.models.generation import GenerationClient

ModelT = TypeVar("ModelT", bound=BaseModel)


class Flow:
    """Base class for all flows.

    Subclasses set name, input_model and output_model and implement execute().
    The generation client is injectable; when omitted the shared Gemini client
    is created on first use.

    Args:
        client: Optional generation client (tests pass a fake)
    """

    name: str = ""
    description: str = ""
    input_model: Type[BaseModel]
    output_model: Type[BaseModel]

    def __init__(self, client: Optional[GenerationClient] = None):
        self._client = client

    async def get_client(self) -> GenerationClient:
        if self._client is None:
            from sahayak.integrations.gemini import GeminiClient
            self._client = await GeminiClient.get_instance()
        return self._client

    async def run(self, payload: Any) -> BaseModel:
        """Run the flow end to end.

        Args:
            payload: Mapping, JSON string, or model instance matching input_model

        Returns:
            Validated output_model instance

        Raises:
            ValidationError: Input (context stage="input") or output (stage="output") shape violation
            TemplateError, GenerationError, ToolExecutionError, ProtocolError: Propagated unchanged
        """
        try:
            data = validate(self.input_model, payload)
        except ValidationError as e:
            e.context.update({"flow": self.name, "stage": "input"})
            logger.info("flow_rejected", flow=self.name, fields=e.fields)
            raise

        log = logger.bind(flow=self.name)
        log.info("flow_started")
        start_time = time.time()

        try:
            output = await self.execute(data)
            result = validate(self.output_model, output)
        except SahayakError as e:
            if isinstance(e, ValidationError):
                e.context.setdefault("stage", "output")
            e.context.setdefault("flow", self.name)
            log.warning(
                "flow_failed",
                error=e.message,
                error_type=type(e).__name__,
                duration_ms=(time.time() - start_time) * 1000,
            )
            raise

        log.info("flow_completed", duration_ms=(time.time() - start_time) * 1000)
        return result

    async def execute(self, data: BaseModel) -> Any:
        raise NotImplementedError

    def prompt_fields(self, data: BaseModel) -> Dict[str, Any]:
        """Fields visible to the prompt template."""
        return data.model_dump(by_alias=True)

    async def generate_structured(
        self,
        template: PromptTemplate,
        fields: Dict[str, Any],
        shape: Type[ModelT],
        model: Optional[str] = None,
    ) -> ModelT:
        """Single structured-output call, validated against shape."""
        client = await self.get_client()
        result = await client.generate(render(template, fields), model=model, output_schema=shape)
        return validate(shape, result.require_data())
