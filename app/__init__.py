"""
Menu Lecture Service - 应用主包

演示 ORM 查询写法和分层的 Web CRUD 结构，包含以下子模块：
- api/          : 路由（Controller）和依赖注入
- services/     : 业务逻辑（Service），负责 Entity -> DTO 映射
- repositories/ : 数据访问（Repository）
- models/       : SQLAlchemy 实体（Entity）
- schemas/      : Pydantic DTO
- queries/      : 面向实体的查询示例
- db/           : 数据库连接、会话管理、示例数据
- infra/        : 日志、模板等基础设施

项目架构遵循分层设计：
    Controller → Service → Repository → Entity
"""
