from pydantic import BaseModel, Field

class CurrencyCreate(BaseModel):
    name: str = Field(..., min_length=1)
    symbol: str = Field(..., min_length=1)

class CurrencyOut(BaseModel):
    id: int
    name: str
    symbol: str

    class Config:
        from_attributes = True
