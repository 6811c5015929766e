from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StatusResponse(BaseModel):
    status_code: int
    message: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


OK = StatusResponse(status_code=200, message="OK")
