from pydantic import BaseModel, Field
from typing import Literal

Difficulty = Literal["Easy", "Medium", "Hard"]
GoalType = Literal["wordCount", "readingTime", "sentences"]

class TextStatistics(BaseModel):
    word_count: int
    character_count: int
    character_count_no_spaces: int
    sentence_count: int
    paragraph_count: int
    average_words_per_sentence: float
    reading_time_minutes: int
    difficulty: Difficulty
    flesch_score: int = Field(ge=0, le=100)

class WritingGoal(BaseModel):
    id: str
    type: GoalType
    target: int = Field(gt=0)
    current: int = 0
    completed: bool = False

class TextRequest(BaseModel):
    text: str

class GoalRequest(BaseModel):
    type: GoalType
    target: int = Field(gt=0)

class GoalProgressRequest(BaseModel):
    goal: WritingGoal
    text: str
