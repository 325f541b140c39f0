'''명령줄 인터페이스 패키지(KR). Command-line interface package (EN).'''
