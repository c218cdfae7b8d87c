"""DTOs shared across use case packages"""

from pydantic import BaseModel, Field


class CsvExportResponseDTO(BaseModel):
    """CSV document produced by an export use case"""

    filename: str = Field(..., description="Suggested download filename")
    content: str = Field(..., description="CSV text")
    row_count: int = Field(..., description="Number of data rows")
