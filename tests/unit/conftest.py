import os
from dataclasses import dataclass

import pytest

# ハンドラのモジュール読み込み時に boto3 リソースが生成されるため、先に設定する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "reservations-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "reservations-test")


@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
    )
    aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"


@pytest.fixture
def lambda_context():
    """Lambda コンテキストのフィクスチャ"""
    return FakeLambdaContext()
