"""
PuppyBowl 데이터 타입 정의.

API 응답(camelCase)과 파이썬 객체(snake_case) 사이의 변환을 담당합니다.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from config.constants import DEFAULT_STATUS


PlayerId = Union[int, str]


@dataclass(frozen=True)
class Player:
    """서버에 저장된 선수 레코드 (읽기 전용)"""
    id: PlayerId
    name: str
    breed: str
    image_url: str
    status: str
    team_id: Optional[int] = None
    cohort_id: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Player':
        """
        API 응답 딕셔너리로부터 생성.

        Raises:
            KeyError: id 필드가 없는 경우
        """
        return cls(
            id=data['id'],
            name=data.get('name', ''),
            breed=data.get('breed', ''),
            image_url=data.get('imageUrl', ''),
            status=data.get('status', ''),
            team_id=data.get('teamId'),
            cohort_id=data.get('cohortId'),
            created_at=data.get('createdAt'),
            updated_at=data.get('updatedAt'),
        )


@dataclass(frozen=True)
class NewPlayer:
    """id가 아직 부여되지 않은 신규 선수"""
    name: str
    breed: str
    image_url: str
    status: str = DEFAULT_STATUS

    def to_payload(self) -> Dict[str, str]:
        """POST 요청 본문"""
        return {
            'name': self.name,
            'breed': self.breed,
            'imageUrl': self.image_url,
            'status': self.status,
        }


@dataclass
class PlayerCard:
    """화면에 그려진 선수 카드 상태"""
    player: Player
    details_visible: bool = False

    def toggle_details(self) -> bool:
        """품종/상태 라인 표시 전환. 전환 후 표시 여부 반환"""
        self.details_visible = not self.details_visible
        return self.details_visible


@dataclass
class RosterView:
    """
    로스터 화면 상태.

    Streamlit 세션 상태에 저장되며 카드 목록과 폼 렌더링 여부를 보관합니다.
    """
    cards: List[PlayerCard] = field(default_factory=list)
    render_count: int = 0
    form_rendered: bool = False

    def clear(self) -> None:
        """이전 렌더링 카드 제거"""
        self.cards = []

    @property
    def player_ids(self) -> List[PlayerId]:
        return [card.player.id for card in self.cards]
