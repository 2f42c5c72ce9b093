from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar
import json
import math
import uuid

from sqlalchemy import String, cast, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class ListParams:
    """Параметры пагинации, поиска и сортировки списка"""
    page: int = 1
    limit: int = 10
    search: Optional[str] = None
    sort: Optional[str] = None
    order: str = "desc"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def pagination(self, total: int) -> Dict[str, int]:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": total,
            "pages": math.ceil(total / self.limit) if self.limit else 0,
        }


LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Экранирование спецсимволов LIKE, чтобы строка искалась буквально"""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def json_array_contains(column, value: str):
    """Условие «элемент есть в JSON-массиве» (по сериализованному тексту)"""
    return cast(column, String).like(f"%{escape_like(json.dumps(value))}%", escape=LIKE_ESCAPE)


class BaseRepository(Generic[ModelT]):
    """Общие операции репозитория: CRUD, поиск, пагинация и статистика"""

    model: Type[ModelT]
    search_fields: Sequence[str] = ()
    sortable_fields: Sequence[str] = ("created_at", "updated_at")
    default_sort: str = "created_at"
    secondary_sort: Sequence[Tuple[str, str]] = ()

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, entity_id: uuid.UUID) -> Optional[ModelT]:
        """Получение записи по id"""
        result = await self.session.execute(
            select(self.model)
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_one(self, *conditions) -> Optional[ModelT]:
        result = await self.session.execute(select(self.model).where(*conditions).limit(1))
        return result.scalar_one_or_none()

    async def create(self, entity: ModelT) -> ModelT:
        """Создание записи"""
        self.session.add(entity)
        await self._commit()
        return await self.get_by_id(entity.id)

    async def save(self, entity: ModelT) -> ModelT:
        """Сохранение изменений записи"""
        await self._commit()
        return await self.get_by_id(entity.id)

    async def delete(self, entity: ModelT) -> None:
        """Удаление записи"""
        await self.session.delete(entity)
        await self.session.commit()

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ValueError(f"{self.model.__name__} could not be saved: conflicting or missing data")

    def search_condition(self, term: str, fields: Optional[Sequence[str]] = None):
        """Регистронезависимый поиск подстроки по набору полей"""
        pattern = f"%{escape_like(term)}%"
        return or_(*(
            getattr(self.model, field).ilike(pattern, escape=LIKE_ESCAPE)
            for field in fields or self.search_fields
        ))

    def order_by(self, params: ListParams) -> List[Any]:
        field = params.sort if params.sort in self.sortable_fields else self.default_sort
        column = getattr(self.model, field)
        primary = column.asc() if params.order == "asc" else column.desc()
        clauses = [primary.nulls_last()]
        for name, direction in self.secondary_sort:
            secondary = getattr(self.model, name)
            clauses.append(secondary.asc() if direction == "asc" else secondary.desc())
        return clauses

    async def paginate(
        self,
        conditions: Sequence[Any],
        params: ListParams,
        search_fields: Optional[Sequence[str]] = None
    ) -> Tuple[List[ModelT], int]:
        """Выборка страницы и общее количество записей"""
        conditions = list(conditions)
        if params.search and (search_fields or self.search_fields):
            conditions.append(self.search_condition(params.search, search_fields))

        total = await self.count(*conditions)
        result = await self.session.execute(
            select(self.model)
            .where(*conditions)
            .order_by(*self.order_by(params))
            .offset(params.offset)
            .limit(params.limit)
        )
        return list(result.scalars().all()), total

    async def count(self, *conditions) -> int:
        """Подсчет записей"""
        result = await self.session.execute(
            select(func.count(self.model.id)).where(*conditions)
        )
        return result.scalar() or 0

    async def count_by(self, field: str, *conditions) -> List[Dict[str, Any]]:
        """Группировка по полю, по убыванию количества"""
        column = getattr(self.model, field)
        total = func.count(self.model.id)
        result = await self.session.execute(
            select(column, total)
            .where(*conditions)
            .group_by(column)
            .order_by(total.desc())
        )
        return [{"name": name, "count": count} for name, count in result.all()]

    async def value_exists(self, field: str, value: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        """Проверка существования значения без учета регистра"""
        column = getattr(self.model, field)
        conditions = [func.lower(column) == value.strip().lower()]
        if exclude_id is not None:
            conditions.append(self.model.id != exclude_id)
        return await self.count(*conditions) > 0

    async def increment(self, entity: ModelT, field: str, step: int = 1) -> ModelT:
        """Увеличение счетчика (чтение, затем запись)"""
        setattr(entity, field, (getattr(entity, field) or 0) + step)
        return await self.save(entity)
