"""
ComputingProvider — config.toml 数据模型
每个 TOML 表对应一个 Pydantic 模型；缺省字段取零值（"" / 0 / 0.0 / False）
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


class _Section(BaseModel):
    """所有配置段的公共设置：按 TOML 键名（别名）读写，忽略未知键"""
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )


# ============================================================
# 配置段
# ============================================================

class APISection(_Section):
    """对外监听与节点标识"""
    port: StrictInt = Field(0, alias="Port")
    multi_address: StrictStr = Field("", alias="MultiAddress")
    domain: StrictStr = Field("", alias="Domain")
    node_name: StrictStr = Field("", alias="NodeName")
    redis_url: StrictStr = Field("", alias="RedisUrl")
    redis_password: StrictStr = Field("", alias="RedisPassword")
    wallet_white_list: StrictStr = Field("", alias="WalletWhiteList")


class UBISection(_Section):
    """UBI 任务（零知识证明任务）开关与引擎地址"""
    ubi_task: StrictBool = Field(False, alias="UbiTask")
    ubi_engine_pk: StrictStr = Field("", alias="UbiEnginePk")
    ubi_url: StrictStr = Field("", alias="UbiUrl")


class LOGSection(_Section):
    """TLS 证书路径"""
    crt_file: StrictStr = Field("", alias="CrtFile")
    key_file: StrictStr = Field("", alias="KeyFile")


class HUBSection(_Section):
    """Orchestrator 连接参数"""
    wallet_address: StrictStr = Field("", alias="WalletAddress")
    server_url: StrictStr = Field("", alias="ServerUrl")
    access_token: StrictStr = Field("", alias="AccessToken")
    balance_threshold: float = Field(0.0, alias="BalanceThreshold", strict=True)
    orchestrator_pk: StrictStr = Field("", alias="OrchestratorPk")
    verify_sign: StrictBool = Field(False, alias="VerifySign")


class MCSSection(_Section):
    """对象存储客户端"""
    api_key: StrictStr = Field("", alias="ApiKey")
    access_token: StrictStr = Field("", alias="AccessToken")
    bucket_name: StrictStr = Field("", alias="BucketName")
    network: StrictStr = Field("", alias="Network")
    file_cache_path: StrictStr = Field("", alias="FileCachePath")


class RegistrySection(_Section):
    """镜像仓库凭据"""
    server_address: StrictStr = Field("", alias="ServerAddress")
    user_name: StrictStr = Field("", alias="UserName")
    password: StrictStr = Field("", alias="Password")


class RPCSection(_Section):
    swan_testnet: StrictStr = Field("", alias="SWAN_TESTNET")
    swan_mainnet: StrictStr = Field("", alias="SWAN_MAINNET")


class ContractSection(_Section):
    swan_token: StrictStr = Field("", alias="SWAN_CONTRACT")
    collateral: StrictStr = Field("", alias="SWAN_COLLATERAL_CONTRACT")


# ============================================================
# 根模型
# ============================================================

class ComputeNodeConfig(_Section):
    """config.toml 的完整内容"""
    api: APISection = Field(default_factory=APISection, alias="API")
    ubi: UBISection = Field(default_factory=UBISection, alias="UBI")
    log: LOGSection = Field(default_factory=LOGSection, alias="LOG")
    hub: HUBSection = Field(default_factory=HUBSection, alias="HUB")
    mcs: MCSSection = Field(default_factory=MCSSection, alias="MCS")
    registry: RegistrySection = Field(default_factory=RegistrySection, alias="Registry")
    rpc: RPCSection = Field(default_factory=RPCSection, alias="RPC")
    contract: ContractSection = Field(default_factory=ContractSection, alias="CONTRACT")

    def to_toml_dict(self) -> dict[str, Any]:
        """按 TOML 键名导出，供 tomli_w 序列化（所有字段都写出，包括零值）"""
        return self.model_dump(by_alias=True)
