from showcase.catalog.schemas import Project


def make_project(pid, created_at, tags=(), title="Untitled", description="", excerpt=""):
    return Project(
        id=pid,
        title=title,
        description=description,
        tags=tuple(tags),
        excerpt=excerpt,
        created_at=created_at,
    )
