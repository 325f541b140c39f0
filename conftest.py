'''KR: 테스트 프로젝트 트리 픽스처. EN: Pytest project tree fixture.'''

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    '''임시 프로젝트 트리를 구성한다(KR). Provision a temporary project tree (EN).'''

    root = tmp_path / 'project'
    (root / 'src' / 'util').mkdir(parents=True)
    (root / '.hg').mkdir(parents=True)
    (root / 'docs').mkdir(parents=True)
    (root / 'src' / 'main.lua').write_text('print("main")\n', encoding='utf-8')
    (root / 'src' / 'util' / 'init.lua').write_text('return {}\n', encoding='utf-8')
    (root / '.hg' / 'store.lua').write_text('-- not a source file\n', encoding='utf-8')
    (root / 'docs' / 'guide.txt').write_text('guide\n', encoding='utf-8')
    (root / 'README.md').write_text('# project\n', encoding='utf-8')
    return root
