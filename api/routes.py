"""
Route definitions for the books API.

Endpoints under /api/books:
- GET    /           : list books, optionally filtered by category
- GET    /{book_id}  : get one book
- POST   /           : create a book
- PUT    /{book_id}  : replace a book's fields
- DELETE /{book_id}  : delete a book
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status

from api.models import MAX_BOOK_ID, Book, BookRequest
from api.store import BookStore

router = APIRouter(prefix="/api/books", tags=["Books"])


def get_store(request: Request) -> BookStore:
    """Book store owned by the running application."""
    return request.app.state.store


@router.get(
    "",
    response_model=List[Book],
    status_code=status.HTTP_200_OK,
    summary="Get all books",
    description="Retrieve a list of all available books"
)
def all_books(
    category: Optional[str] = Query(None, description="Only return books in this category (exact match)"),
    store: BookStore = Depends(get_store)
):
    return store.list(category)


@router.get(
    "/{book_id}",
    response_model=Book,
    status_code=status.HTTP_200_OK,
    summary="Get a book by Id",
    description="Retrieve a specific book by its Id"
)
def find_book_by_id(
    book_id: int = Path(..., ge=1, le=MAX_BOOK_ID, description="Id of the book to retrieve"),
    store: BookStore = Depends(get_store)
):
    return store.find_by_id(book_id)


@router.post(
    "",
    response_model=Book,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Add a new book to the list"
)
def create_book(
    book_request: BookRequest,
    store: BookStore = Depends(get_store)
):
    return store.create(book_request)


@router.put(
    "/{book_id}",
    response_model=Book,
    status_code=status.HTTP_200_OK,
    summary="Update a book",
    description="Update the details of an existing book"
)
def update_book(
    book_request: BookRequest,
    book_id: int = Path(..., ge=1, le=MAX_BOOK_ID, description="Id of the book to update"),
    store: BookStore = Depends(get_store)
):
    return store.update(book_id, book_request)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a book",
    description="Remove a book from the list"
)
def delete_book(
    book_id: int = Path(..., ge=1, le=MAX_BOOK_ID, description="Id of the book to delete"),
    store: BookStore = Depends(get_store)
):
    store.delete(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
