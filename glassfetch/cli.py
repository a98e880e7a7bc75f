"""
CLI 模块

命令行接口实现。
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import click
import toml
import yaml
from loguru import logger

from glassfetch import __version__
from glassfetch.exceptions import ConfigParseError, GlassFetchError
from glassfetch.logger import setup_logger
from glassfetch.models import GlassFetchConfig, VerifyReport
from glassfetch.sources import SourceVerifier


def load_config(config_path: str) -> dict:
    """按扩展名加载 TOML / JSON / YAML 配置文件"""
    path = Path(config_path)
    suffix = path.suffix.lower()

    try:
        if suffix == ".toml":
            return toml.loads(path.read_text(encoding="utf-8"))
        elif suffix == ".json":
            return json.loads(path.read_text(encoding="utf-8"))
        elif suffix in (".yaml", ".yml"):
            return yaml.safe_load(path.read_text(encoding="utf-8"))
    except (toml.TomlDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigParseError(
            f"配置文件解析失败: {e}", context={"path": config_path}
        ) from e
    except (UnicodeDecodeError, OSError) as e:
        raise ConfigParseError(
            f"无法读取配置文件: {e}", context={"path": config_path}
        ) from e
    raise ConfigParseError(f"不支持的配置文件格式: {suffix}", context={"path": config_path})


async def run_async(config: GlassFetchConfig) -> VerifyReport:
    """异步运行"""
    verifier = SourceVerifier(config.source_dir, config.extension)
    return await verifier.run(config.sources)


@click.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
@click.option("--source-dir", help="覆盖配置中的 source_dir")
@click.option("--json", "as_json", is_flag=True, help="以 JSON 输出校验结果")
@click.option("--strict", is_flag=True, help="有数据源未通过校验时返回非零退出码")
@click.option("--dry-run", is_flag=True, help="干运行模式（只验证配置）")
@click.option("--debug", is_flag=True, help="启用调试模式")
@click.version_option(version=__version__)
def main(
    config: str,
    source_dir: Optional[str],
    as_json: bool,
    strict: bool,
    dry_run: bool,
    debug: bool,
):
    """GlassFetch - 玻璃目录文件校验与下载工具"""
    setup_logger(level="DEBUG" if debug else None, sink=click.get_text_stream("stderr"))

    try:
        cfg = GlassFetchConfig.from_dict(load_config(config))
    except GlassFetchError as e:
        logger.error(f"配置错误: {e}")
        raise click.ClickException(str(e))

    if source_dir:
        cfg.source_dir = source_dir

    if dry_run:
        logger.info("[干运行模式] 配置验证通过")
        logger.info(f"  数据目录: {cfg.source_dir}")
        logger.info(f"  数据源数量: {len(cfg.sources)}")
        return

    report = asyncio.run(run_async(cfg))
    logger.success(
        f"完成! {len(report.verified)}/{len(report.outcomes)} 个数据源校验通过"
    )

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))

    if strict and report.dropped:
        sys.exit(1)


if __name__ == "__main__":
    main()
