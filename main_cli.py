# main_cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from core.exceptions import DeleteBlockedError, DomainError
from core.services.scheduling import ScheduleResult
from infra.db.base import database_url, make_engine, make_session_factory
from infra.logging_config import setup_logging
from infra.migrate import run_migrations
from infra.operational_support import bind_trace_id
from infra.services import ServiceGraph, build_service_graph, parse_due_date
from infra.version import get_app_version

logger = logging.getLogger(__name__)


def build_services(db_url: str | None = None) -> ServiceGraph:
    url = db_url or database_url()
    run_migrations(db_url=url)
    session = make_session_factory(make_engine(url))()
    return build_service_graph(session)


def _fmt(value) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else "-"


def _print_schedule(result: ScheduleResult) -> None:
    print(f"{'ID':>5}  {'TITLE':<30} {'DUE':<16} {'EARLIEST START':<16} {'DEPS':<12} FLAGS")
    for info in result.tasks:
        task = info.task
        flags = []
        if info.is_on_critical_path:
            flags.append("critical")
        if info.is_overdue:
            flags.append("overdue")
        deps = ",".join(str(d) for d in sorted(task.dependencies)) or "-"
        print(
            f"{task.id:>5}  {task.title[:30]:<30} {_fmt(task.due_date):<16} "
            f"{_fmt(info.earliest_start_date):<16} {deps:<12} {' '.join(flags)}"
        )


def _cmd_list(services: ServiceGraph, args: argparse.Namespace) -> int:
    _print_schedule(services.scheduling_engine.recalculate_schedule())
    return 0


def _cmd_add(services: ServiceGraph, args: argparse.Namespace) -> int:
    task = services.task_service.create_task(
        title=args.title,
        due_date=parse_due_date(args.due),
        description=args.description or "",
        dependencies=args.depends_on or [],
        image_url=args.image_url,
    )
    print(f"Created task {task.id}: {task.title}")
    return 0


def _cmd_edit(services: ServiceGraph, args: argparse.Namespace) -> int:
    dependencies = None
    if args.no_deps:
        dependencies = []
    elif args.depends_on is not None:
        dependencies = args.depends_on
    task = services.task_service.update_task(
        args.task_id,
        title=args.title,
        description=args.description,
        due_date=parse_due_date(args.due) if args.due else None,
        dependencies=dependencies,
    )
    print(f"Updated task {task.id}: {task.title}")
    return 0


def _cmd_delete(services: ServiceGraph, args: argparse.Namespace) -> int:
    services.task_service.delete_task(args.task_id)
    print(f"Deleted task {args.task_id}")
    return 0


def _cmd_check(services: ServiceGraph, args: argparse.Namespace) -> int:
    diagnostic = services.task_service.get_dependency_diagnostics(args.task_id, args.depends_on)
    print(f"[{diagnostic.code}] {diagnostic.summary}")
    print(diagnostic.detail)
    for suggestion in diagnostic.suggestions:
        print(f"  - {suggestion}")
    return 0 if diagnostic.is_valid else 1


def _cmd_critical_path(services: ServiceGraph, args: argparse.Namespace) -> int:
    result = services.scheduling_engine.recalculate_schedule()
    titles = {info.task.id: info.task.title for info in result.tasks}
    if not result.critical_path:
        print("No tasks.")
        return 0
    print(" -> ".join(f"#{tid} {titles.get(tid, '?')}" for tid in result.critical_path))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskgraph",
        description="Task dependency scheduling: cycle checks, earliest starts, critical path.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_app_version()}")
    parser.add_argument("--db-url", default=None, help="SQLAlchemy database URL (default: TASKGRAPH_DB_URL or user data dir)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List tasks with earliest starts and critical-path flags")
    p_list.set_defaults(handler=_cmd_list)

    p_add = sub.add_parser("add", help="Create a task")
    p_add.add_argument("title")
    p_add.add_argument("--due", required=True, help="Due date (YYYY-MM-DD or ISO timestamp)")
    p_add.add_argument("--description", default="")
    p_add.add_argument("--image-url", default=None)
    p_add.add_argument("--depends-on", type=int, nargs="*", default=[])
    p_add.set_defaults(handler=_cmd_add)

    p_edit = sub.add_parser("edit", help="Update a task")
    p_edit.add_argument("task_id", type=int)
    p_edit.add_argument("--title", default=None)
    p_edit.add_argument("--description", default=None)
    p_edit.add_argument("--due", default=None)
    deps = p_edit.add_mutually_exclusive_group()
    deps.add_argument("--depends-on", type=int, nargs="+", default=None)
    deps.add_argument("--no-deps", action="store_true")
    p_edit.set_defaults(handler=_cmd_edit)

    p_delete = sub.add_parser("delete", help="Delete a task nothing depends on")
    p_delete.add_argument("task_id", type=int)
    p_delete.set_defaults(handler=_cmd_delete)

    p_check = sub.add_parser("check", help="Validate a dependency change without saving it")
    p_check.add_argument("task_id", type=int)
    p_check.add_argument("--depends-on", type=int, nargs="*", default=[])
    p_check.set_defaults(handler=_cmd_check)

    p_cp = sub.add_parser("critical-path", help="Print the critical (longest) dependency chain")
    p_cp.set_defaults(handler=_cmd_critical_path)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    with bind_trace_id() as trace_id:
        services = build_services(args.db_url)
        try:
            return args.handler(services, args)
        except DeleteBlockedError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            for dep_id, title in exc.dependents:
                print(f"  depends on it: #{dep_id} {title}", file=sys.stderr)
            return 1
        except DomainError as exc:
            logger.warning("Command %s rejected [%s]: %s", args.command, exc.code, exc)
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 2
        finally:
            services.session.close()
            logger.debug("Finished command %s (trace=%s)", args.command, trace_id)


if __name__ == "__main__":
    sys.exit(main())
