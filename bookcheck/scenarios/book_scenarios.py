from bookcheck.errors import FixtureNotFoundError
from bookcheck.http import is_empty_body
from bookcheck.scenarios.base import ScenarioRun, provision_book, provision_category, scenario
from bookcheck.services import book_service, category_service

BOOK_FIELDS = ("title", "author", "description", "price", "pages", "category")


async def _list_books(run: ScenarioRun, label: str) -> list:
    with run.step(label) as s:
        resp = await book_service.get_books(run.client)
        s.status(resp, message="Failed to retrieve books")
        s.not_empty(resp.text, "Get books response content is empty")
        books = s.json(resp, list, "Expected response content to be a JSON array")
    return books


def _find_book_id(run: ScenarioRun, books: list, title: str) -> str:
    with run.step("find book by title") as s:
        book = book_service.find_by_title(books, title)
        book_id = book.get("_id")
        s.not_empty(book_id, f"Book '{title}' didn't have an Id.")
    return str(book_id)


@scenario("list-all-books")
async def list_all_books(run: ScenarioRun):
    category_id = await provision_category(run)
    await provision_book(run, category_id)

    with run.step("list books") as s:
        resp = await book_service.get_books(run.client)
        s.status(resp)
        s.not_empty(resp.text, "Response content should not be empty")
        books = s.json(resp, list, "Expected response content to be a JSON array")
        s.check(len(books) > 0, "Expected at least one book in the response")
        for index, book in enumerate(books):
            if not s.check(isinstance(book, dict), f"Book #{index} should be a JSON object"):
                continue
            for name in BOOK_FIELDS:
                s.not_empty(book.get(name), f"Book #{index} {name} should not be null or empty")


@scenario("find-book-by-title")
async def find_book_by_title(run: ScenarioRun):
    category_id = await provision_category(run)
    _, payload = await provision_book(run, category_id)

    books = await _list_books(run, "list books")
    with run.step("find book by title") as s:
        book = book_service.find_by_title(books, payload.title)
        s.equal(book.get("author"), payload.author, "Book author should be different")


@scenario("add-book")
async def add_book(run: ScenarioRun):
    await provision_category(run)

    with run.step("pick category") as s:
        resp = await category_service.get_categories(run.client)
        s.status(resp)
        categories = s.json(resp, list, "Expected response content to be a JSON array")
        category_id = category_service.first_category_id(categories)
        if category_id is None:
            raise FixtureNotFoundError("Category", "position", "first")

    payload = run.factories.books.build(category_id)
    with run.step("create book") as s:
        resp = await book_service.create_book(run.client, run.token, payload)
        s.status(resp)
        s.not_empty(resp.text, "Response content should not be empty")
        created = s.json(resp, dict, "Expected the created book as a JSON object")
        book_id = created.get("_id")
        if s.not_empty(book_id, "Created book didn't have an Id."):
            book_id = str(book_id)
            run.track_book(book_id)

    with run.step("get created book") as s:
        resp = await book_service.get_book(run.client, book_id)
        s.status(resp)
        s.not_empty(resp.text, "Response content should not be empty")
        content = s.json(resp, dict, "Expected the book as a JSON object")
        s.equal(content.get("title"), payload.title, "Book title should match the input.")
        s.equal(content.get("author"), payload.author, "Book author should match the input.")
        s.equal(content.get("description"), payload.description, "Book description should match the input.")
        s.number_equal(content.get("price"), payload.price, "Book price should match the input.")
        s.integer_equal(content.get("pages"), payload.pages, "Book pages should match the input.")
        category = content.get("category")
        if s.check(isinstance(category, dict) and category, "Book category should not be null or empty"):
            s.equal(category.get("_id"), category_id, f"Book category should be '{category_id}'")


@scenario("update-book")
async def update_book(run: ScenarioRun):
    category_id = await provision_category(run)
    _, original = await provision_book(run, category_id)

    books = await _list_books(run, "list books")
    book_id = _find_book_id(run, books, original.title)

    update = run.factories.books.build_update(original)
    with run.step("update book") as s:
        resp = await book_service.update_book(run.client, run.token, book_id, update)
        s.status(resp)
        s.not_empty(resp.text, "Update response content should not be empty")
        content = s.json(resp, dict, "Expected the updated book as a JSON object")
        s.equal(content.get("title"), update.title, "Book name should match the updated value")
        s.equal(content.get("author"), update.author, "Book author should match the updated value")

    with run.step("verify untouched fields") as s:
        resp = await book_service.get_book(run.client, book_id)
        s.status(resp)
        content = s.json(resp, dict, "Expected the book as a JSON object")
        s.equal(content.get("_id"), book_id, "Book ID should be unchanged")
        s.equal(content.get("description"), original.description, "Book description should be unchanged")
        s.number_equal(content.get("price"), original.price, "Book price should be unchanged")
        s.integer_equal(content.get("pages"), original.pages, "Book pages should be unchanged")
        category = content.get("category")
        category_ref = category.get("_id") if isinstance(category, dict) else category
        s.equal(category_ref, category_id, "Book category should be unchanged")


@scenario("delete-book")
async def delete_book(run: ScenarioRun):
    category_id = await provision_category(run)
    _, payload = await provision_book(run, category_id)

    books = await _list_books(run, "list books")
    book_id = _find_book_id(run, books, payload.title)

    with run.step("delete book") as s:
        resp = await book_service.delete_book(run.client, run.token, book_id)
        if s.status(resp, message="Expected status code Ok"):
            run.forget(book_id)

    with run.step("get deleted book") as s:
        resp = await book_service.get_book(run.client, book_id)
        s.check(is_empty_body(resp), f"Verify get response content should be empty (body: {resp.text[:200]!r})")
