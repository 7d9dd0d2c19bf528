"""
查询示例模块

- simple.py : 基础查询写法（单行单列、多行、DISTINCT、IN、LIKE）
"""
