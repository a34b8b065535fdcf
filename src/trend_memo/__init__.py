"""피드 트렌드를 수집하고 사용자별 메모/상태를 관리한다."""
