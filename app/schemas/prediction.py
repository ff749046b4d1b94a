from pydantic import BaseModel, Field
from typing import List, Union


class PredictionResult(BaseModel):
    disease: str
    # int stays int so "87" renders as "87%", not "87.0%"
    confidence: Union[int, float]
    matched_symptoms: List[str] = Field(default_factory=list)
    description: str = ""
    suggested_medicines: List[str] = Field(default_factory=list)
    precautions: List[str] = Field(default_factory=list)
    doctor_specialty: str = ""
    disclaimer: str = ""
