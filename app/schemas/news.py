"""NewsAPI response schemas."""

from pydantic import BaseModel, Field


class ArticleSource(BaseModel):
    id: str | None = None
    name: str = ""


class Article(BaseModel):
    source: ArticleSource = Field(default_factory=ArticleSource)
    author: str | None = None
    title: str = ""
    description: str | None = None
    url: str = ""
    url_to_image: str | None = Field(default=None, alias="urlToImage")
    published_at: str | None = Field(default=None, alias="publishedAt")
    content: str | None = None


class NewsResponse(BaseModel):
    """``/v2/top-headlines`` payload; ``code``/``message`` are set when status is "error"."""

    status: str
    total_results: int = Field(default=0, alias="totalResults")
    articles: list[Article] = Field(default_factory=list)
    code: str | None = None
    message: str | None = None
