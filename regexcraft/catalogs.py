"""格式目录

静态查找表：电话号码（按地区）、日期模板、邮箱、URL、IPv4。
所有形状都是整串匹配的主体（不含 ^ / \\Z，由 Fragment.anchored 负责加锚点）。

地区 / 日期格式使用封闭枚举，无法识别的键按固定策略回退：
    PhoneRegion.resolve("XX")      -> PhoneRegion.INTERNATIONAL
    DateFormat.resolve("YY.MM.DD") -> DateFormat.YYYY_MM_DD
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

logger = logging.getLogger(__name__)


class PhoneRegion(str, Enum):
    """支持的电话号码地区"""

    RW = "RW"            # 卢旺达
    DRC = "DRC"          # 刚果（金）
    US = "US"            # 美国
    UK = "UK"            # 英国
    KE = "KE"            # 肯尼亚
    UG = "UG"            # 乌干达
    TZ = "TZ"            # 坦桑尼亚
    NG = "NG"            # 尼日利亚
    ZA = "ZA"            # 南非
    GH = "GH"            # 加纳
    E164 = "E164"
    INTERNATIONAL = "international"

    @classmethod
    def resolve(cls, region: Union[str, "PhoneRegion", None]) -> "PhoneRegion":
        """解析地区代码（不区分大小写），无法识别时回退为 INTERNATIONAL"""
        if isinstance(region, PhoneRegion):
            return region
        if region:
            member = _REGION_BY_KEY.get(str(region).strip().upper())
            if member is not None:
                return member
        logger.debug(f"未知电话地区 {region!r}，回退为 international")
        return cls.INTERNATIONAL


_REGION_BY_KEY = {member.value.upper(): member for member in PhoneRegion}


class DateFormat(str, Enum):
    """支持的日期模板"""

    YYYY_MM_DD = "YYYY-MM-DD"
    MM_DD_YYYY = "MM/DD/YYYY"
    DD_MM_YYYY = "DD/MM/YYYY"
    ISO = "ISO"

    @classmethod
    def resolve(cls, date_format: Union[str, "DateFormat", None]) -> "DateFormat":
        """解析日期模板，无法识别时回退为 YYYY-MM-DD"""
        if isinstance(date_format, DateFormat):
            return date_format
        if date_format:
            try:
                return cls(str(date_format).strip())
            except ValueError:
                pass
        logger.debug(f"未知日期格式 {date_format!r}，回退为 YYYY-MM-DD")
        return cls.YYYY_MM_DD


# ==================== 电话 ====================

_PHONE_PATTERNS: Mapping[PhoneRegion, str] = MappingProxyType({
    PhoneRegion.RW: r"(?:\+?250|0)?7[2-9][0-9]{7}",
    PhoneRegion.DRC: r"(?:\+?243|0)?8[1-9][0-9]{7}",
    PhoneRegion.US: r"\+?1?[-.]?\(?[0-9]{3}\)?[-.]?[0-9]{3}[-.]?[0-9]{4}",
    PhoneRegion.UK: r"\+?44\s?[0-9]{10}",
    PhoneRegion.KE: r"(?:\+?254|0)?[71][0-9]{8}",
    PhoneRegion.UG: r"(?:\+?256|0)?7[0-9]{8}",
    PhoneRegion.TZ: r"(?:\+?255|0)?[67][0-9]{8}",
    PhoneRegion.NG: r"(?:\+?234|0)?[789][0-9]{9}",
    PhoneRegion.ZA: r"(?:\+?27|0)?[6-8][0-9]{8}",
    PhoneRegion.GH: r"(?:\+?233|0)?[235][0-9]{8}",
    PhoneRegion.E164: r"\+[1-9][0-9]{1,14}",
    PhoneRegion.INTERNATIONAL: (
        r"\+?[0-9]{1,4}?[-.]?\(?[0-9]{1,3}?\)?[-.]?[0-9]{1,4}[-.]?[0-9]{1,4}[-.]?[0-9]{1,9}"
    ),
})


def phone_pattern(region: Union[str, PhoneRegion, None]) -> str:
    return _PHONE_PATTERNS[PhoneRegion.resolve(region)]


def get_supported_phone_regions() -> list:
    """获取支持的电话地区列表"""
    return [region.value for region in PhoneRegion]


# ==================== 日期 ====================

_YEAR = r"[0-9]{4}"
_MONTH = r"(?:0[1-9]|1[0-2])"
_DAY = r"(?:0[1-9]|[12][0-9]|3[01])"

_DATE_PATTERNS: Mapping[DateFormat, str] = MappingProxyType({
    DateFormat.YYYY_MM_DD: f"{_YEAR}-{_MONTH}-{_DAY}",
    DateFormat.MM_DD_YYYY: f"{_MONTH}/{_DAY}/{_YEAR}",
    DateFormat.DD_MM_YYYY: f"{_DAY}/{_MONTH}/{_YEAR}",
    # 时间戳：可选小数秒，时区为 Z 或 ±HH:MM
    DateFormat.ISO: (
        f"{_YEAR}-{_MONTH}-{_DAY}"
        r"T(?:[01][0-9]|2[0-3]):[0-5][0-9]:[0-5][0-9](?:\.[0-9]+)?"
        r"(?:Z|[+-](?:[01][0-9]|2[0-3]):[0-5][0-9])"
    ),
})


def date_pattern(date_format: Union[str, DateFormat, None]) -> str:
    return _DATE_PATTERNS[DateFormat.resolve(date_format)]


# ==================== 邮箱 / URL / IPv4 ====================

EMAIL_PATTERN = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"

_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
IPV4_PATTERN = rf"(?:{_OCTET}\.){{3}}{_OCTET}"

_URL_PROTOCOL = r"https?://"
_URL_BODY = r"(?:[a-zA-Z0-9_-]+\.)+[a-zA-Z0-9_-]+(?:/[a-zA-Z0-9_ ./?%&=-]*)?"


def url_pattern(protocol: Optional[bool] = True) -> str:
    """URL 主体

    Args:
        protocol: True 要求协议前缀，False 时协议前缀可选
    """
    if protocol:
        return f"{_URL_PROTOCOL}{_URL_BODY}"
    return f"(?:{_URL_PROTOCOL})?{_URL_BODY}"


__all__ = [
    "PhoneRegion",
    "DateFormat",
    "phone_pattern",
    "date_pattern",
    "url_pattern",
    "get_supported_phone_regions",
    "EMAIL_PATTERN",
    "IPV4_PATTERN",
]
