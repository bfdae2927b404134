import logging
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)


def split_load_balancer_names(names: Union[str, Iterable[str], None]) -> List[str]:
    """
    スペース区切りのELB名を順序を保ったままリストに分割します。
    重複はそのまま残し、空の要素は除外します。
    """
    if not names:
        return []
    if isinstance(names, str):
        return names.split()
    return [name for name in names if name]


def list_load_balancer_names(elb_client) -> List[str]:
    """
    すべてのClassic Load Balancerの名前を取得します。

    引数:
        elb_client: boto3の"elb"クライアント

    戻り値:
        List[str]: ELB名のリスト（APIが返した順）
    """
    names = []
    paginator = elb_client.get_paginator("describe_load_balancers")
    for page in paginator.paginate():
        for elb in page["LoadBalancerDescriptions"]:
            names.append(elb["LoadBalancerName"])

    logger.info(f"{len(names)}個のELBが見つかりました")
    return names


def resolve_load_balancer_names(
    names: Union[str, Iterable[str], None], elb_client
) -> List[str]:
    """ELB名が指定されていればそれを使い、なければ全ELBを列挙します。"""
    explicit = split_load_balancer_names(names)
    if explicit:
        return explicit
    return list_load_balancer_names(elb_client)
