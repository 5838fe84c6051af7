from llm_gateway.llms.router import generate_with_provider, get_client
from llm_gateway.schemas.request import GenerateRequest


async def generate(request: GenerateRequest) -> str:
    client = get_client(request.provider)
    text, _ = await generate_with_provider(
        client,
        provider=request.provider,
        model=request.model,
        prompt=request.prompt,
        temperature=request.temperature,
        max_tokens=request.max_tokens,
    )
    return text
