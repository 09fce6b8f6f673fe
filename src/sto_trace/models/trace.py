"""轨迹查询请求和响应模型"""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import ValidationError


class TraceOrder(str, Enum):
    """轨迹排序方式"""
    ASC = "asc"
    DESC = "desc"


_VALID_ORDERS = {"", TraceOrder.ASC.value, TraceOrder.DESC.value}


class TraceQueryRequest(BaseModel):
    """轨迹查询请求参数

    字段声明顺序即序列化顺序 (order, waybillNoList)，签名依赖该顺序。
    """
    model_config = ConfigDict(populate_by_name=True)

    order: str = Field(default="", description="排序方式，asc（升序）或desc（降序），为空时服务端默认升序")
    waybill_no_list: List[str] = Field(default_factory=list, alias="waybillNoList", description="运单号列表")

    @field_validator("order", mode="before")
    @classmethod
    def _order_value(cls, v: Any) -> Any:
        if isinstance(v, TraceOrder):
            return v.value
        if v is None:
            return ""
        return v

    @classmethod
    def of(cls, *waybill_nos: str, order: str = "") -> "TraceQueryRequest":
        """按运单号构建请求"""
        return cls(order=order, waybill_no_list=list(waybill_nos))

    def validate_request(self) -> None:
        """验证请求参数"""
        if not self.waybill_no_list:
            raise ValidationError("waybillNoList cannot be empty")
        if self.order not in _VALID_ORDERS:
            raise ValidationError("order must be either 'asc' or 'desc'")

    def to_content(self) -> bytes:
        """序列化为紧凑JSON，作为content参数和签名原文"""
        return self.model_dump_json(by_alias=True).encode("utf-8")


class TraceEvent(BaseModel):
    """物流轨迹信息，所有字段原样保留服务端字符串"""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True, extra="ignore")

    waybill_no: str = Field(default="", alias="waybillNo", description="运单号")
    op_time: str = Field(default="", alias="opTime", description="操作时间")
    op_org_code: str = Field(default="", alias="opOrgCode", description="操作机构代码")
    op_org_name: str = Field(default="", alias="opOrgName", description="操作机构名称")
    op_org_province_name: str = Field(default="", alias="opOrgProvinceName", description="操作机构所在省")
    op_org_city_name: str = Field(default="", alias="opOrgCityName", description="操作机构所在市")
    op_org_tel: str = Field(default="", alias="opOrgTel", description="操作机构电话")
    op_emp_code: str = Field(default="", alias="opEmpCode", description="操作员工号")
    op_emp_name: str = Field(default="", alias="opEmpName", description="操作员姓名")
    scan_type: str = Field(default="", alias="scanType", description="扫描类型")
    weight: str = Field(default="", alias="weight", description="重量")
    memo: str = Field(default="", alias="memo", description="备注")
    biz_emp_code: str = Field(default="", alias="bizEmpCode", description="业务员工号")
    biz_emp_name: str = Field(default="", alias="bizEmpName", description="业务员姓名")
    biz_emp_phone: str = Field(default="", alias="bizEmpPhone", description="业务员电话")
    biz_emp_tel: str = Field(default="", alias="bizEmpTel", description="业务员固定电话")
    next_org_name: str = Field(default="", alias="nextOrgName", description="下一站机构名称")
    next_org_code: str = Field(default="", alias="nextOrgCode", description="下一站机构代码")
    issue_name: str = Field(default="", alias="issueName", description="问题件名称")
    signoff_people: str = Field(default="", alias="signoffPeople", description="签收人")
    container_no: str = Field(default="", alias="containerNo", description="集包号")
    order_org_code: str = Field(default="", alias="orderOrgCode", description="下单机构代码")
    order_org_name: str = Field(default="", alias="orderOrgName", description="下单机构名称")
    transport_task_no: str = Field(default="", alias="transportTaskNo", description="运输任务号")
    car_no: str = Field(default="", alias="carNo", description="车牌号")
    op_org_type_code: str = Field(default="", alias="opOrgTypeCode", description="操作机构类型代码")
    partner_name: str = Field(default="", alias="partnerName", description="品牌方名称")

    @field_validator("*", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class TraceQueryResponse(BaseModel):
    """轨迹查询响应"""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True, extra="ignore")

    success: str = Field(default="", description="是否成功")
    error_code: str = Field(default="", alias="errorCode", description="错误码")
    error_msg: str = Field(default="", alias="errorMsg", description="错误信息")
    need_retry: str = Field(default="", alias="needRetry", description="是否需要重试")
    request_id: str = Field(default="", alias="requestId", description="请求ID")
    exp_info: str = Field(default="", alias="expInfo", description="异常信息")
    data: Dict[str, List[TraceEvent]] = Field(default_factory=dict, description="运单号对应的轨迹列表")

    @field_validator("success", "error_code", "error_msg", "need_retry", "request_id", "exp_info", mode="before")
    @classmethod
    def _flag_as_str(cls, v: Any) -> Any:
        # 部分网关返回JSON布尔值而非字符串
        if v is None:
            return ""
        if isinstance(v, bool):
            return "true" if v else "false"
        return v

    @field_validator("data", mode="before")
    @classmethod
    def _null_data(cls, v: Any) -> Any:
        if v is None:
            return {}
        if isinstance(v, dict):
            return {k: cls._null_events(events) for k, events in v.items()}
        return v

    @staticmethod
    def _null_events(v: Any) -> Any:
        # null 列表视为空列表，null 轨迹视为空轨迹
        if v is None:
            return []
        if isinstance(v, list):
            return [{} if event is None else event for event in v]
        return v

    def is_success(self) -> bool:
        """检查是否成功"""
        return self.success == "true"

    def should_retry(self) -> bool:
        """检查是否需要重试"""
        return self.need_retry == "true"

    def traces_for(self, waybill_no: str) -> List[TraceEvent]:
        """获取单个运单的轨迹，不存在时返回空列表"""
        return self.data.get(waybill_no, [])
