import argparse
import logging
import sys

from gradebook.app_shell.config import resolve_rules
from gradebook.app_shell.context import ServiceContext
from gradebook.components.statistics import format_statistics
from gradebook.components.validation import ItemFormInput, StudentFormInput
from gradebook.domain.entities import Item, Student

logger = logging.getLogger("cli")


class StdinConfirm:
    """Confirmation prompt on the terminal."""

    def confirm(self, message: str) -> bool:
        answer = input(f"{message} [y/N]: ")
        return answer.strip().lower() in ("y", "yes")


class AlwaysConfirm:
    def confirm(self, message: str) -> bool:
        return True


def format_student(student: Student) -> str:
    return (
        f"[{student.id}] {student.name} - {student.subject} - "
        f"{student.score:.1f} ({student.category})"
    )


def format_item(item: Item) -> str:
    return f"[{item.id}] {item.value}"


def print_errors(errors: dict[str, str]) -> None:
    for field, message in errors.items():
        print(f"  {field}: {message}")


# --- Student commands ---


def handle_list(ctx: ServiceContext, args: argparse.Namespace) -> int:
    students = ctx.gradebook.get_collection()
    if not students:
        print("No students registered. Add the first one with 'add'.")
        return 0
    print(f"Students ({len(students)}):")
    for student in students:
        print(f"  {format_student(student)}")
    return 0


def handle_add(ctx: ServiceContext, args: argparse.Namespace) -> int:
    form = StudentFormInput(name=args.name, subject=args.subject, score=args.score)
    student, errors = ctx.gradebook.submit(form)
    if student is None:
        print("Student not saved:")
        print_errors(errors)
        return 1
    print(f"Added {format_student(student)}")
    return 0


def handle_edit(ctx: ServiceContext, args: argparse.Namespace) -> int:
    existing = ctx.gradebook.get_student(args.id)
    if existing is None:
        logger.error(f"No student with id {args.id}.")
        return 1

    ctx.gradebook.select_for_edit(existing)
    form = StudentFormInput(name=args.name, subject=args.subject, score=args.score)
    student, errors = ctx.gradebook.submit(form)
    if student is None:
        ctx.gradebook.cancel_edit()
        print("Student not updated:")
        print_errors(errors)
        return 1
    print(f"Updated {format_student(student)}")
    return 0


def handle_delete(ctx: ServiceContext, args: argparse.Namespace) -> int:
    if ctx.gradebook.get_student(args.id) is None:
        logger.error(f"No student with id {args.id}.")
        return 1

    confirm = AlwaysConfirm() if args.yes else StdinConfirm()
    if not ctx.gradebook.delete(args.id, confirm=confirm):
        print("Nothing deleted.")
        return 0
    print(f"Deleted student {args.id}.")
    return 0


def handle_stats(ctx: ServiceContext, args: argparse.Namespace) -> int:
    lines = format_statistics(ctx.gradebook.aggregate())
    if not lines:
        print("No statistics yet: the gradebook is empty.")
        return 0
    for line in lines:
        print(line)
    return 0


# --- Item commands ---


def handle_items(ctx: ServiceContext, args: argparse.Namespace) -> int:
    service = ctx.items

    if args.items_command == "list":
        items = service.get_collection()
        if not items:
            print("No items.")
        for item in items:
            print(f"  {format_item(item)}")
        return 0

    if args.items_command == "add":
        item, errors = service.submit(ItemFormInput(value=args.value))
        if item is None:
            print("Item not saved:")
            print_errors(errors)
            return 1
        print(f"Added {format_item(item)}")
        return 0

    existing = service.get_item(args.id)
    if existing is None:
        logger.error(f"No item with id {args.id}.")
        return 1

    if args.items_command == "edit":
        service.select_for_edit(existing)
        item, errors = service.submit(ItemFormInput(value=args.value))
        if item is None:
            service.cancel_edit()
            print("Item not updated:")
            print_errors(errors)
            return 1
        print(f"Updated {format_item(item)}")
        return 0

    confirm = AlwaysConfirm() if args.yes else StdinConfirm()
    if not service.delete(args.id, confirm=confirm):
        print("Nothing deleted.")
        return 0
    print(f"Deleted item {args.id}.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gradebook", description="Gradebook record manager")
    parser.add_argument("--rules", help="Path to rules.yaml")
    parser.add_argument("--data-dir", help="Directory holding saved collections")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List students")

    add_parser = subparsers.add_parser("add", help="Add a student")
    add_parser.add_argument("name")
    add_parser.add_argument("subject")
    add_parser.add_argument("score", help="Score between 1.0 and 7.0")

    edit_parser = subparsers.add_parser("edit", help="Replace a student's fields")
    edit_parser.add_argument("id", type=int)
    edit_parser.add_argument("name")
    edit_parser.add_argument("subject")
    edit_parser.add_argument("score")

    delete_parser = subparsers.add_parser("delete", help="Delete a student")
    delete_parser.add_argument("id", type=int)
    delete_parser.add_argument("--yes", action="store_true", help="Skip confirmation")

    subparsers.add_parser("stats", help="Show course statistics")

    # items
    items_parser = subparsers.add_parser("items", help="Manage generic items")
    items_sub = items_parser.add_subparsers(dest="items_command", required=True)
    items_sub.add_parser("list", help="List items")
    items_add = items_sub.add_parser("add", help="Add an item")
    items_add.add_argument("value")
    items_edit = items_sub.add_parser("edit", help="Replace an item's value")
    items_edit.add_argument("id", type=int)
    items_edit.add_argument("value")
    items_delete = items_sub.add_parser("delete", help="Delete an item")
    items_delete.add_argument("id", type=int)
    items_delete.add_argument("--yes", action="store_true", help="Skip confirmation")

    return parser


HANDLERS = {
    "list": handle_list,
    "add": handle_add,
    "edit": handle_edit,
    "delete": handle_delete,
    "stats": handle_stats,
    "items": handle_items,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        rules = resolve_rules(args.rules, args.data_dir)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    logging.getLogger().setLevel(rules.logging.level)

    ctx = ServiceContext.create(rules)
    return HANDLERS[args.command](ctx, args)


if __name__ == "__main__":
    sys.exit(main())
