"""Base model com serialização camelCase para as respostas GraphQL do DeepSource."""

from pydantic import BaseModel, ConfigDict


def to_camel(string: str) -> str:
    """Converte snake_case → camelCase."""
    parts = string.split("_")
    return parts[0] + "".join(word.capitalize() for word in parts[1:])


class CamelCaseModel(BaseModel):
    """Base model que lê e serializa campos em camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_graphql(self) -> dict:
        """Serializa no formato camelCase da API, sem campos nulos."""
        return self.model_dump(by_alias=True, exclude_none=True)
