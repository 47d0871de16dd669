from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from botocore.config import Config

from services.booking.domain.enum import AdmissionPolicy


@dataclass(frozen=True)
class StoreSettings:
    """環境変数から読み込む設定

    タイムアウトしたストア呼び出しは StoreFailure（リトライ可能）として扱う。
    """

    table_name: str | None = None
    connect_timeout: float = 2.0
    read_timeout: float = 5.0
    max_attempts: int = 3
    admission_policy: AdmissionPolicy = AdmissionPolicy.STRICT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StoreSettings:
        env = os.environ if environ is None else environ
        return cls(
            table_name=env.get("TABLE_NAME"),
            connect_timeout=float(env.get("STORE_CONNECT_TIMEOUT", "2")),
            read_timeout=float(env.get("STORE_READ_TIMEOUT", "5")),
            max_attempts=int(env.get("STORE_MAX_ATTEMPTS", "3")),
            admission_policy=AdmissionPolicy(
                env.get("ADMISSION_POLICY", AdmissionPolicy.STRICT.value).lower()
            ),
        )

    def boto_config(self) -> Config:
        return Config(
            connect_timeout=self.connect_timeout,
            read_timeout=self.read_timeout,
            retries={"total_max_attempts": self.max_attempts, "mode": "standard"},
        )
