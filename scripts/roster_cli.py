#!/usr/bin/env python3
"""
로스터 CLI.

터미널에서 Puppy Bowl 로스터를 조회/등록/삭제합니다.

사용법:
    # 전체 로스터
    python scripts/roster_cli.py list

    # 단일 선수 상세
    python scripts/roster_cli.py show 42

    # 신규 선수 등록 (상태 생략 시 bench)
    python scripts/roster_cli.py add --name Rex --breed Lab --image-url http://x/y.png

    # 삭제 후 갱신된 로스터 출력
    python scripts/roster_cli.py remove 42
"""

import sys
from pathlib import Path
import argparse
import asyncio
from typing import List, Optional

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from app.components.player_form import build_new_player
from app.models.data_types import Player, RosterView
from app.services.roster_service import RosterApp
from config.settings import Settings, get_settings
from src.data_collection.puppy_bowl_client import create_puppy_bowl_client
from src.utils.logger import set_console_level


def format_player(player: Player, details: bool = False) -> str:
    """선수 한 줄 포맷"""
    line = f"#{player.id:<6} {player.name}"
    if details:
        line += f"\n        Breed:  {player.breed}"
        line += f"\n        Status: {player.status}"
        line += f"\n        Image:  {player.image_url}"
    return line


def print_roster(view: RosterView) -> None:
    if not view.cards:
        print("  (로스터 비어 있음)")
        return
    for card in view.cards:
        print(f"  {format_player(card.player)}")
    print(f"\n  총 {len(view.cards)}명")


async def run_command(args: argparse.Namespace, settings: Settings) -> int:
    """
    서브커맨드 실행.

    Returns:
        프로세스 종료 코드
    """
    async with create_puppy_bowl_client(settings) as client:
        app = RosterApp(client, default_status=settings.default_status)

        if args.command == "list":
            await app.init()
            print_roster(app.view)
            return 0

        if args.command == "show":
            result = await app.fetch_single_player(args.player_id)
            if not result.ok:
                return 1
            print(format_player(result.data, details=True))
            return 0

        if args.command == "add":
            new_player = build_new_player(
                name=args.name,
                breed=args.breed,
                image_url=args.image_url,
                status=args.status,
                default_status=settings.default_status,
            )
            result = await app.add_new_player(new_player)
            if not result.ok:
                return 1
            print(f"등록 완료: {format_player(result.data)}")
            return 0

        if args.command == "remove":
            result = await app.remove_player(args.player_id)
            if not result.ok:
                return 1
            print(f"삭제 완료: #{args.player_id}")
            print_roster(app.view)
            return 0

    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Puppy Bowl 로스터 관리')
    parser.add_argument('--cohort', help='코호트 이름 (설정값 덮어쓰기)')
    parser.add_argument('--verbose', action='store_true', help='DEBUG 로그 출력')

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('list', help='전체 로스터 출력')

    show_parser = subparsers.add_parser('show', help='단일 선수 상세')
    show_parser.add_argument('player_id', help='선수 ID')

    add_parser = subparsers.add_parser('add', help='신규 선수 등록')
    add_parser.add_argument('--name', required=True, help='이름')
    add_parser.add_argument('--breed', required=True, help='품종')
    add_parser.add_argument('--image-url', required=True, help='이미지 URL')
    add_parser.add_argument('--status', help='상태 (생략 시 기본값)')

    remove_parser = subparsers.add_parser('remove', help='선수 삭제')
    remove_parser.add_argument('player_id', help='선수 ID')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    if args.cohort:
        settings = settings.model_copy(update={"cohort_name": args.cohort})

    set_console_level("DEBUG" if args.verbose else settings.log_level)

    return asyncio.run(run_command(args, settings))


if __name__ == "__main__":
    sys.exit(main())
