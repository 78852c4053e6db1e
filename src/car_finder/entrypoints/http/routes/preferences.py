from fastapi import APIRouter, Depends

from car_finder.entrypoints.http.dependencies import get_theme_preference
from car_finder.entrypoints.http.dtos.preferences import ThemeResponseDTO
from car_finder.use_cases.theme_preference import ThemePreference


router = APIRouter(prefix="/preferences", tags=["Preferences"])


@router.get("/theme", response_model=ThemeResponseDTO, summary="Current theme")
def get_theme(theme: ThemePreference = Depends(get_theme_preference)) -> ThemeResponseDTO:
    return ThemeResponseDTO(dark_mode=theme.dark_mode)


@router.post(
    "/theme/toggle",
    response_model=ThemeResponseDTO,
    summary="Toggle dark mode",
    description="Flip the dark mode flag and persist it.",
)
def toggle_theme(theme: ThemePreference = Depends(get_theme_preference)) -> ThemeResponseDTO:
    return ThemeResponseDTO(dark_mode=theme.toggle())
