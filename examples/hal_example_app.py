"""Example FastAPI app serving HAL resources backed by SQLAlchemy.

Run with:
    uvicorn examples.hal_example_app:app --reload
"""

from typing import Iterator

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, create_engine, select
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from fastapi_hal import HalErrorMiddleware, HalRouter, IntoHal
from fastapi_hal.core import ETag, Headers, Location
from fastapi_hal.logging import configure_logging

DATABASE_URL = "sqlite://"

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
SessionLocal = sessionmaker(engine, expire_on_commit=False)

Base = declarative_base()


class Item(Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)


class ItemCreate(BaseModel):
    name: str


class ItemFields(BaseModel):
    id: int
    name: str


class ItemResource(IntoHal):
    """A single item with links to itself and its collection."""

    def __init__(self, request: Request, item: Item) -> None:
        self.request = request
        self.item = item

    def headers(self, headers: Headers) -> None:
        headers.with_header(ETag(f"item-{self.item.id}-{self.item.name}"))

    def links(self):
        return [
            ("self", str(self.request.url_for("get_item", item_id=self.item.id))),
            ("collection", str(self.request.url_for("list_items"))),
        ]

    def payload(self) -> ItemFields:
        return ItemFields(id=self.item.id, name=self.item.name)


class CreatedItemResource(ItemResource):
    def status_code(self) -> int:
        return 201

    def headers(self, headers: Headers) -> None:
        super().headers(headers)
        headers.with_header(
            Location(str(self.request.url_for("get_item", item_id=self.item.id)))
        )


class ItemCollectionResource(IntoHal):
    """All items, linked one by one under the ``item`` relation."""

    def __init__(self, request: Request, items: list[Item]) -> None:
        self.request = request
        self.items = items

    def links(self):
        yield "self", str(self.request.url_for("list_items"))
        for item in self.items:
            yield "item", {
                "href": str(self.request.url_for("get_item", item_id=item.id)),
                "name": item.name,
            }

    def payload(self) -> dict:
        return {"count": len(self.items)}


def get_session() -> Iterator[Session]:
    with SessionLocal() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise


router = HalRouter(prefix="/items", tags=["Items"])


@router.hal_route("/", methods=["GET"], name="list_items")
def list_items(request: Request, session: Session = Depends(get_session)):
    items = list(session.scalars(select(Item).order_by(Item.id)))
    return ItemCollectionResource(request, items)


@router.hal_route("/{item_id}", methods=["GET"], name="get_item")
def get_item(item_id: int, request: Request, session: Session = Depends(get_session)):
    item = session.get(Item, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return ItemResource(request, item)


@router.hal_route("/", methods=["POST"], name="create_item")
def create_item(
    data: ItemCreate, request: Request, session: Session = Depends(get_session)
):
    item = Item(name=data.name)
    session.add(item)
    session.flush()
    return CreatedItemResource(request, item)


def create_app() -> FastAPI:
    """Build the example app on a fresh schema."""
    configure_logging()
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    application = FastAPI(title="HAL example")
    application.add_middleware(HalErrorMiddleware)
    application.include_router(router)
    return application


app = create_app()
