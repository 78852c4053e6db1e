from pydantic import BaseModel


class ThemeResponseDTO(BaseModel):
    dark_mode: bool
