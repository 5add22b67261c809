"""MobileCases - 移动端测试用例存储

以 YAML 文件管理测试用例：保存、校验、列表、查看、删除、运行（展示）与套件组装。
"""

__version__ = "0.1.0"
