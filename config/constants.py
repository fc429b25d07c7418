"""
프로젝트 전역 상수.

컨테이너 ID, 버튼 라벨, 기본 상태값 등 UI와 API 전반에서 사용되는 상수를 정의합니다.
"""

# 화면 컨테이너 ID
PLAYER_CONTAINER_ID = "all-players-container"
FORM_CONTAINER_ID = "new-player-form"

# 상태 필드가 없는 폼에서 사용하는 기본 상태
DEFAULT_STATUS = "bench"

# API 리소스 경로
PLAYERS_ENDPOINT = "players"

# 카드 버튼 라벨
DETAILS_LABEL = "See Details"
REMOVE_LABEL = "Remove from Roster"

# 폼 라벨
FORM_TITLE = "Add New Player"
FORM_HINT = "The new player will be the last in the lineup"
ADD_PLAYER_LABEL = "Add Player"
