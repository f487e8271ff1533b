from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.journal import MovieDraft, MovieEntry

# PATCH 中显式传 null 时恢复默认值（占位海报 / 空标签 / 今天）
_RESETTABLE_FIELDS = ("image", "tags", "date_watched")


def _year_not_blank(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        raise ValueError("year must not be empty")
    return v


class MovieCreateRequest(BaseModel):
    """新增电影条目请求模型（字段名与云端 JSON 一致）"""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, description="电影标题")
    director: str = Field(..., min_length=1, description="导演")
    year: Union[int, str] = Field(..., description="上映年份")
    country: str = Field(..., min_length=1, description="国家/地区")
    rating: int = Field(default=3, ge=1, le=5, description="评分 1-5")
    image: Optional[str] = Field(default=None, description="海报 URL（可选，留空使用占位图）")
    review: str = Field(..., min_length=1, description="短评")
    tags: Union[str, List[str]] = Field(default="", description="标签，逗号分隔或数组")
    date_watched: Optional[str] = Field(
        default=None,
        alias="dateWatched",
        description="观看日期 YYYY-MM-DD（可选，默认今天）",
    )

    @field_validator("year")
    @classmethod
    def _valid_year(cls, v: Union[int, str]) -> Union[int, str]:
        return _year_not_blank(v)

    def to_draft(self) -> MovieDraft:
        return MovieDraft(
            title=self.title,
            director=self.director,
            year=self.year,
            country=self.country,
            review=self.review,
            rating=self.rating,
            image=self.image,
            tags=self.tags,
            date_watched=self.date_watched,
        )


class MovieUpdateRequest(BaseModel):
    """编辑电影条目请求模型：只修改传入的字段，id 不可变"""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(default=None, min_length=1)
    director: Optional[str] = Field(default=None, min_length=1)
    year: Optional[Union[int, str]] = None
    country: Optional[str] = Field(default=None, min_length=1)
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    image: Optional[str] = None
    review: Optional[str] = Field(default=None, min_length=1)
    tags: Optional[Union[str, List[str]]] = None
    date_watched: Optional[str] = Field(default=None, alias="dateWatched")

    # 默认值不触发校验，只有请求里显式给出的 null 会进来
    @field_validator("title", "director", "year", "country", "rating", "review", mode="before")
    @classmethod
    def _required_not_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("field cannot be null")
        return _year_not_blank(v)

    def to_changes(self) -> Dict[str, Any]:
        fields = self.model_dump(exclude_unset=True, by_alias=False)
        return {k: ("" if v is None and k in _RESETTABLE_FIELDS else v) for k, v in fields.items()}


class CloudSettingsRequest(BaseModel):
    """云同步端点设置"""

    cloud_url: str = Field(default="", description="表格 Web App 地址；留空关闭同步")


class JournalStateResponse(BaseModel):
    view: str
    cloud_url: str
    sync_status: str
    count: int


class SyncStatusResponse(BaseModel):
    status: str
    cloud_url: str


class SyncResultResponse(BaseModel):
    status: str
    count: int


def movie_to_response(movie: MovieEntry) -> Dict[str, Any]:
    return movie.to_dict()
