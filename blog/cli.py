# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Command line front end for the blog service."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from blog.client import BlogClient, ClientError, FileSessionStore
from blog.interfaces.dto import PostDTO
from blog.shared.config import ClientConfig
from blog.shared.errors import ErrorKind

EXIT_OK = 0
EXIT_CLIENT_ERROR = 1
EXIT_SERVER_ERROR = 2

ClientFactory = Callable[[argparse.Namespace], BlogClient]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blog", description="Blog service client")
    parser.add_argument("-s", "--server", help="server address (HTTP URL, or host:port with --grpc)")
    parser.add_argument("--grpc", action="store_true", help="talk to the gRPC endpoint")
    parser.add_argument("--token-file", help="where the session token is kept")

    commands = parser.add_subparsers(dest="command", required=True)

    register = commands.add_parser("register", help="create an account and log in")
    register.add_argument("-u", "--username", required=True)
    register.add_argument("-e", "--email", required=True)
    register.add_argument("-p", "--password", required=True)

    login = commands.add_parser("login", help="log in and store the session token")
    login.add_argument("-u", "--username", required=True)
    login.add_argument("-p", "--password", required=True)

    commands.add_parser("logout", help="forget the stored session token")
    commands.add_parser("status", help="show the stored session")

    create = commands.add_parser("create", help="publish a post")
    create.add_argument("-t", "--title", required=True)
    create.add_argument("-c", "--content", required=True)

    get = commands.add_parser("get", help="show one post")
    get.add_argument("-i", "--id", type=int, required=True)

    update = commands.add_parser("update", help="edit your post")
    update.add_argument("-i", "--id", type=int, required=True)
    update.add_argument("-t", "--title")
    update.add_argument("-c", "--content")

    delete = commands.add_parser("delete", help="delete your post")
    delete.add_argument("-i", "--id", type=int, required=True)

    listing = commands.add_parser("list", help="list posts, newest first")
    listing.add_argument("-l", "--limit", type=int, default=10)
    listing.add_argument("-o", "--offset", type=int, default=0)

    return parser


def _default_client(args: argparse.Namespace) -> BlogClient:
    config = ClientConfig()  # type: ignore[call-arg]
    store = FileSessionStore(args.token_file or config.token_file)
    return BlogClient.connect(
        args.server or config.server,
        use_grpc=args.grpc,
        store=store,
        timeout=config.timeout,
    )


def _print_post(post: PostDTO, out: TextIO) -> None:
    print(f"#{post.id} {post.title}", file=out)
    print(f"  author: {post.author_id}", file=out)
    print(f"  created: {post.created_at.isoformat()}  updated: {post.updated_at.isoformat()}", file=out)
    print(f"  {post.content}", file=out)


def _run(client: BlogClient, args: argparse.Namespace, out: TextIO) -> None:
    command = args.command
    if command == "register":
        result = client.register_and_login(args.username, args.email, args.password)
        print(f"Registered {result.user.username} (id {result.user.id}); logged in", file=out)
    elif command == "login":
        result = client.login(args.username, args.password)
        print(f"Logged in as {result.user.username}; session expires {result.expires_at.isoformat()}", file=out)
    elif command == "logout":
        client.logout()
        print("Logged out", file=out)
    elif command == "status":
        status = client.status()
        if not status.logged_in:
            print("Not logged in", file=out)
        elif status.expires_at is None:
            print("Logged in (token could not be read)", file=out)
        else:
            state = "expired" if status.expired else "valid"
            print(
                f"Logged in as {status.username} (id {status.user_id}); "
                f"token {state} until {status.expires_at.isoformat()}",
                file=out,
            )
    elif command == "create":
        _print_post(client.create_post(args.title, args.content), out)
    elif command == "get":
        _print_post(client.get_post(args.id), out)
    elif command == "update":
        _print_post(client.update_post(args.id, title=args.title, content=args.content), out)
    elif command == "delete":
        client.delete_post(args.id)
        print(f"Deleted post {args.id}", file=out)
    elif command == "list":
        page = client.list_posts(limit=args.limit, offset=args.offset)
        shown_to = page.offset + len(page.posts)
        print(f"Posts {page.offset + 1 if page.posts else 0}-{shown_to} of {page.total}", file=out)
        for post in page.posts:
            _print_post(post, out)


def main(
    argv: Sequence[str] | None = None,
    *,
    client_factory: ClientFactory = _default_client,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    args = build_parser().parse_args(argv)

    client = client_factory(args)
    try:
        _run(client, args, out)
    except ClientError as exc:
        print(f"error: {exc.kind.value}: {exc.message}", file=err)
        return EXIT_SERVER_ERROR if exc.kind is ErrorKind.INTERNAL else EXIT_CLIENT_ERROR
    finally:
        client.close()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
