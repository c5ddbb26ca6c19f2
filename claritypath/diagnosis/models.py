from pydantic import BaseModel, ConfigDict, Field


class ClarityEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    prompt: str
    summary: str
    feelings: list[str]
    action_plan: list[str] = Field(alias='actionPlan')
    reflection_prompts: list[str] = Field(alias='reflectionPrompts')
    created_at: str = Field(alias='createdAt')

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
