from bookcheck.http import is_empty_body
from bookcheck.scenarios.base import ScenarioRun, scenario
from bookcheck.services import category_service


@scenario("category-lifecycle")
async def category_lifecycle(run: ScenarioRun):
    factory = run.factories.categories
    payload = factory.build()

    with run.step("create category") as s:
        resp = await category_service.create_category(run.client, run.token, payload)
        s.status(resp)
        created = s.json(resp, dict, "Expected the created category as a JSON object")
        category_id = created.get("_id")
        if s.not_empty(category_id, "Category ID should not be null or empty"):
            category_id = str(category_id)
            run.track_category(category_id)
        s.equal(created.get("title"), payload.title, "Expected the created category name to match")

    with run.step("list categories") as s:
        resp = await category_service.get_categories(run.client)
        s.status(resp)
        s.not_empty(resp.text, "Response content should not be empty")
        categories = s.json(resp, list, "Expected response content to be a JSON array")
        s.check(len(categories) > 0, "Expected at least one category in the response")
        s.check(
            any(isinstance(c, dict) and c.get("_id") == category_id for c in categories),
            f"Expected the created category {category_id} in the response"
        )

    with run.step("get category by id") as s:
        resp = await category_service.get_category(run.client, category_id)
        category = s.json(resp, dict, "Expected the category as a JSON object")
        s.equal(category.get("_id"), category_id, "Expected the category ID to match")
        s.equal(category.get("title"), payload.title, "Expected the category name to match")

    update = factory.build_update(payload)
    with run.step("update category") as s:
        resp = await category_service.update_category(run.client, run.token, category_id, update)
        s.status(resp)

    with run.step("get updated category") as s:
        resp = await category_service.get_category(run.client, category_id)
        s.status(resp)
        s.not_empty(resp.text, "Response content should not be empty")
        updated = s.json(resp, dict, "Expected the category as a JSON object")
        s.equal(updated.get("title"), update.title, "Expected the updated category name to match")

    with run.step("delete category") as s:
        resp = await category_service.delete_category(run.client, run.token, category_id)
        if s.status(resp):
            run.forget(category_id)

    with run.step("get deleted category") as s:
        resp = await category_service.get_category(run.client, category_id)
        s.check(is_empty_body(resp), f"Deleted category should not be found (body: {resp.text[:200]!r})")
